"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from seo_analyzer import cli as cli_module
from seo_analyzer.analyzer import build_report
from seo_analyzer.errors import SiteNotFoundError
from seo_analyzer.fetch import FetchedPage
from seo_analyzer.tools.outline import heading_outline
from seo_analyzer.text import parse_html

from .conftest import BASE_URL, good_page_html


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def report():
    page = FetchedPage(html=good_page_html(), elapsed_ms=100, final_url=BASE_URL + "/")
    return build_report(BASE_URL, page, True, False)


class TestScanCommand:
    def test_json_output(self, runner, report, monkeypatch):
        calls = []

        def fake_analyze(url, settings=None, client=None):
            calls.append((url, settings))
            return report

        monkeypatch.setattr(cli_module, "analyze_site", fake_analyze)
        result = runner.invoke(cli_module.cli, ["--timeout", "3", "scan", "example.com", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["url"] == BASE_URL
        assert data["score"] == report.score
        assert list(data["categories"]) == list(report.categories)
        assert calls[0][0] == "example.com"
        assert calls[0][1].timeout == 3.0

    def test_human_output(self, runner, report, monkeypatch):
        monkeypatch.setattr(cli_module, "analyze_site", lambda url, settings=None: report)
        result = runner.invoke(cli_module.cli, ["scan", "example.com", "--verbose"])

        assert result.exit_code == 0, result.output
        assert "SEO Score" in result.output
        assert "Robots.txt" in result.output

    def test_error_exits_nonzero(self, runner, monkeypatch):
        def fail(url, settings=None):
            raise SiteNotFoundError("https://nope.invalid")

        monkeypatch.setattr(cli_module, "analyze_site", fail)
        result = runner.invoke(cli_module.cli, ["scan", "nope.invalid"])
        assert result.exit_code == 1


class TestToolCommands:
    def test_headings_json(self, runner, monkeypatch):
        outline = heading_outline(parse_html("<h1>Title</h1><h3>Deep</h3>"))
        seen = []

        def fake_run_tool(name, url, settings=None):
            seen.append(name)
            return outline

        monkeypatch.setattr(cli_module, "run_tool", fake_run_tool)
        result = runner.invoke(cli_module.cli, ["headings", "example.com", "--json"])

        assert result.exit_code == 0, result.output
        assert seen == ["heading-structure"]
        assert json.loads(result.output)["total"] == 2

    def test_tool_error_exits_nonzero(self, runner, monkeypatch):
        def fail(name, url, settings=None):
            raise SiteNotFoundError(url)

        monkeypatch.setattr(cli_module, "run_tool", fail)
        result = runner.invoke(cli_module.cli, ["keywords", "nope.invalid"])
        assert result.exit_code == 1


def test_group_without_command_prints_help(runner):
    result = runner.invoke(cli_module.cli, [])
    assert result.exit_code == 0
    assert "scan" in result.output
