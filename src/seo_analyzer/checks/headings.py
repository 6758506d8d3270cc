"""Check heading usage and hierarchy."""

from bs4 import BeautifulSoup, Tag

from ..models import CategoryResult, Check, Status


HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def heading_level(tag: Tag) -> int:
    """Numeric level of an <hN> element."""
    return int(tag.name[1])


def find_level_skips(levels: list[int]) -> list[int]:
    """Indexes where a heading goes more than one level deeper than the previous one.

    Going back up any number of levels is never a skip.
    """
    return [i for i in range(1, len(levels)) if levels[i] - levels[i - 1] > 1]


def check_headings(soup: BeautifulSoup) -> CategoryResult:
    """Check H1 uniqueness, H2 presence and heading order."""
    checks: list[Check] = []

    h1s = soup.find_all("h1")
    if not h1s:
        checks.append(Check(
            name="H1 Tag",
            status=Status.FAIL,
            message="No H1 tag found on the page",
            recommendation="Add exactly one H1 tag that describes the page content",
        ))
    elif len(h1s) > 1:
        checks.append(Check(
            name="H1 Tag",
            status=Status.WARNING,
            message=f"Multiple H1 tags found ({len(h1s)})",
            recommendation="Use only one H1 tag per page for better SEO",
        ))
    else:
        checks.append(Check(
            name="H1 Tag",
            status=Status.PASS,
            message="Single H1 tag found",
            value=h1s[0].get_text().strip()[:100],
        ))

    counts = {name: len(soup.find_all(name)) for name in HEADING_TAGS}

    if counts["h2"]:
        checks.append(Check(
            name="Subheadings (H2)",
            status=Status.PASS,
            message=f"{counts['h2']} H2 subheadings found",
        ))
    else:
        checks.append(Check(
            name="Subheadings (H2)",
            status=Status.WARNING,
            message="No H2 subheadings, content may lack structure",
            recommendation="Use H2 tags to break content into sections",
        ))

    # find_all returns headings in document order
    levels = [heading_level(h) for h in soup.find_all(HEADING_TAGS)]
    summary = " ".join(f"H{i}:{counts[f'h{i}']}" for i in range(1, 5))

    if find_level_skips(levels):
        checks.append(Check(
            name="Heading Hierarchy",
            status=Status.WARNING,
            message="Heading levels are skipped (e.g. H2 → H4)",
            value=summary,
            recommendation="Don't skip heading levels, use H1 → H2 → H3 in order",
        ))
    else:
        checks.append(Check(
            name="Heading Hierarchy",
            status=Status.PASS,
            message="Heading hierarchy is properly structured",
            value=summary,
        ))

    return CategoryResult(name="Headings", icon="📑", checks=checks)
