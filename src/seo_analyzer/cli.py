"""CLI interface for seo-analyzer."""

import json
import logging
import sys
from dataclasses import replace

import click
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import __version__
from .analyzer import analyze_site
from .config import Settings
from .errors import AnalysisError
from .models import AnalysisResult, Status
from .tools import run_tool


console = Console()
err_console = Console(stderr=True)

COMMANDS = ["scan", "redirects", "keywords", "readability", "headings", "social"]


def status_style(status: Status) -> str:
    """Get Rich style for a check status."""
    return {
        Status.PASS: "green",
        Status.WARNING: "yellow",
        Status.FAIL: "red",
    }.get(status, "white")


def status_icon(status: Status) -> str:
    """Get icon for a check status."""
    return {
        Status.PASS: "✓",
        Status.WARNING: "⚠",
        Status.FAIL: "✗",
    }.get(status, "•")


def score_color(score: float) -> str:
    """Get color for a score value."""
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    elif score >= 40:
        return "orange1"
    else:
        return "red"


def score_bar(score: int, width: int = 20) -> Text:
    """Create a visual score bar."""
    filled = int((score / 100) * width)
    empty = width - filled
    color = score_color(score)

    bar = Text()
    bar.append("█" * filled, style=color)
    bar.append("░" * empty, style="dim")
    bar.append(f" {score}/100", style=f"bold {color}")
    return bar


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def print_result(result: AnalysisResult, verbose: bool = False) -> None:
    """Print analysis result to console."""
    console.print()
    console.print(Panel(
        f"[bold]{result.page_title}[/bold]\n"
        f"[dim]{result.final_url}[/dim]",
        title="🔍 SEO Analysis",
        border_style="blue"
    ))

    console.print()
    console.print("  SEO Score: ", end="")
    console.print(score_bar(result.score, width=25))
    console.print()

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Status")

    for category in result.categories.values():
        status_parts = []
        failed = category.count(Status.FAIL)
        warnings = category.count(Status.WARNING)

        if failed > 0:
            status_parts.append(f"[red]{failed} failed[/red]")
        if warnings > 0:
            status_parts.append(f"[yellow]{warnings} warning{'s' if warnings > 1 else ''}[/yellow]")
        if not failed and not warnings:
            status_parts.append("[green]OK[/green]")

        table.add_row(
            f"{category.icon} {category.name}",
            f"[{score_color(category.score)}]{category.score}/100[/]",
            ", ".join(status_parts)
        )

    console.print(table)

    # Verbose mode shows every check, otherwise just warnings and failures
    title = "All Checks" if verbose else "Issues Found"
    shown = [c for c in result.checks if verbose or c.status != Status.PASS]
    if shown:
        console.print(f"\n[bold]{title}:[/bold]\n")
        for check in shown:
            style = status_style(check.status)
            console.print(f"  [{style}]{status_icon(check.status)}[/] [bold]{check.name}[/bold]: {check.message}")
            if verbose and check.value:
                console.print(f"    [dim]{check.value}[/dim]")
            if check.recommendation:
                console.print(f"    [cyan]→ {check.recommendation}[/cyan]")

    summary = result.summary
    console.print(
        f"\n  [green]{summary.passed} passed[/green] · "
        f"[yellow]{summary.warnings} warnings[/yellow] · "
        f"[red]{summary.failed} failed[/red] "
        f"[dim]of {summary.total_checks} checks[/dim]"
    )

    if summary.critical_issues:
        console.print("\n[bold]🚨 Critical Issues:[/bold]\n")
        for i, message in enumerate(summary.critical_issues, 1):
            console.print(f"  {i}. {message}")

    console.print()
    console.print("[dim]─" * 50 + "[/dim]")
    console.print(f"[dim]seo-analyzer v{__version__} • analyzed {result.analyzed_at:%Y-%m-%d %H:%M UTC}[/dim]")
    console.print()


def print_report(title: str, url: str, rows: list[tuple[str, str]], notes: list[str]) -> None:
    """Print a two-column tool report with an optional list of notes."""
    console.print()
    console.print(Panel(f"[bold]{url}[/bold]", title=title, border_style="blue"))

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field_name, value in rows:
        table.add_row(field_name, value or "[dim]-[/dim]")
    console.print(table)

    for note in notes:
        console.print(f"  [yellow]⚠[/] {note}")
    console.print()


def run_or_exit(tool: str, url: str, settings: Settings):
    """Run a tool, printing a readable error and exiting 1 on failure."""
    with console.status(f"[bold blue]Checking {url}...[/bold blue]"):
        try:
            return run_tool(tool, url, settings=settings)
        except AnalysisError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)


def emit_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group(invoke_without_command=True)
@click.option("--log-level", default="WARNING", envvar="SEO_ANALYZER_LOG_LEVEL",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging verbosity (stderr)")
@click.option("-t", "--timeout", type=float, default=None, help="Page fetch timeout in seconds")
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx, log_level: str, timeout: float | None):
    """SEO Analyzer - On-page SEO audit with a scored report.

    \b
    Quick start:
        seo-analyzer scan example.com
        seo-analyzer keywords example.com

    \b
    Commands:
        scan         Full 8-category SEO analysis
        redirects    Follow the redirect chain
        keywords     Keyword and phrase density
        readability  Flesch / Gunning Fog readability scores
        headings     Heading outline and issues
        social       Social share preview
    """
    configure_logging(log_level)
    settings = Settings.from_env()
    if timeout is not None:
        settings = replace(settings, timeout=timeout)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("url")
@click.option("-v", "--verbose", is_flag=True, help="Show all checks, not just issues")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def scan(settings: Settings, url: str, verbose: bool, json_output: bool):
    """Analyze a URL's on-page SEO.

    \b
    Examples:
        seo-analyzer scan example.com
        seo-analyzer scan example.com --verbose
        seo-analyzer scan example.com --json
    """
    with console.status(f"[bold blue]Analyzing {url}...[/bold blue]"):
        try:
            result = analyze_site(url, settings=settings)
        except AnalysisError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)

    if json_output:
        emit_json(result.to_dict())
    else:
        print_result(result, verbose=verbose)


@cli.command()
@click.argument("url")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def redirects(settings: Settings, url: str, json_output: bool):
    """Follow a URL's redirect chain (up to 10 hops)."""
    report = run_or_exit("redirect-check", url, settings)
    if json_output:
        emit_json(report.to_dict())
        return

    table = Table(box=box.SIMPLE, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("URL", style="cyan")
    table.add_column("Status", justify="right")
    table.add_column("Type")
    for i, hop in enumerate(report.chain, 1):
        color = "green" if 200 <= hop.status < 300 else "red" if hop.status == 0 or hop.status >= 400 else "yellow"
        table.add_row(str(i), hop.url, f"[{color}]{hop.status}[/]", hop.type)

    console.print()
    console.print(table)
    console.print(f"  Redirects: [bold]{report.total_redirects}[/bold]")
    if report.has_loop:
        console.print("  [red]✗ Redirect loop detected[/red]")
    console.print()


@cli.command()
@click.argument("url")
@click.option("-n", "--top", default=10, help="Rows to show per table")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def keywords(settings: Settings, url: str, top: int, json_output: bool):
    """Keyword and phrase density of the page text."""
    report = run_or_exit("keyword-density", url, settings)
    if json_output:
        emit_json(report.to_dict())
        return

    console.print()
    console.print(f"  [bold]{report.total_words}[/bold] words, [bold]{report.unique_words}[/bold] unique")
    for title, stats in (("Keywords", report.one_word), ("2-word phrases", report.two_word),
                         ("3-word phrases", report.three_word)):
        table = Table(title=title, box=box.SIMPLE, header_style="bold")
        table.add_column("Keyword", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Density", justify="right")
        for stat in stats[:top]:
            table.add_row(stat.keyword, str(stat.count), f"{stat.density:.2f}%")
        console.print(table)


@cli.command()
@click.argument("url")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def readability(settings: Settings, url: str, json_output: bool):
    """Readability scores of the page text."""
    report = run_or_exit("readability", url, settings)
    if json_output:
        emit_json(report.to_dict())
        return

    print_report("📖 Readability", url, [
        ("Level", f"[{score_color(report.flesch_reading_ease)}]{report.readability_level}[/]"),
        ("Flesch Reading Ease", str(report.flesch_reading_ease)),
        ("Flesch-Kincaid Grade", str(report.flesch_kincaid_grade)),
        ("Gunning Fog Index", str(report.gunning_fog_index)),
        ("Words / Sentences", f"{report.total_words} / {report.total_sentences}"),
        ("Avg sentence length", str(report.avg_sentence_length)),
        ("Complex words", str(report.complex_words)),
    ], report.recommendations)


@cli.command()
@click.argument("url")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def headings(settings: Settings, url: str, json_output: bool):
    """Heading outline of the page."""
    outline = run_or_exit("heading-structure", url, settings)
    if json_output:
        emit_json(outline.to_dict())
        return

    console.print()
    for heading in outline.headings:
        indent = "  " * heading.level
        console.print(f"{indent}[cyan]{heading.tag}[/cyan] {heading.text}")
    console.print()
    console.print("  " + "  ".join(f"{tag}:{count}" for tag, count in outline.counts.items()))
    for issue in outline.issues:
        console.print(f"  [yellow]⚠[/] {issue}")
    console.print()


@cli.command()
@click.argument("url")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def social(settings: Settings, url: str, json_output: bool):
    """Social share preview of the page."""
    preview = run_or_exit("social-preview", url, settings)
    if json_output:
        emit_json(preview.to_dict())
        return

    print_report("📱 Social Preview", url, [
        ("Title", preview.title),
        ("Description", preview.description),
        ("Image", preview.image),
        ("Site name", preview.site_name),
        ("Twitter card", preview.twitter_card),
        ("Twitter title", preview.twitter_title),
        ("Twitter image", preview.twitter_image),
    ], [f"Missing {tag}" for tag in preview.missing])


# Convenience: allow `seo-analyzer URL` as shortcut for `seo-analyzer scan URL`
def main():
    """Entry point that handles both `seo-analyzer URL` and `seo-analyzer scan URL`."""
    args = sys.argv[1:]

    # If first arg looks like a URL (not a command), insert 'scan'
    if args and not args[0].startswith('-') and args[0] not in COMMANDS:
        if '.' in args[0] or args[0] == 'localhost':
            sys.argv.insert(1, 'scan')

    cli()


if __name__ == "__main__":
    main()
