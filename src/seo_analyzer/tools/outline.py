"""Heading outline of a page with structural issues."""

from dataclasses import asdict, dataclass, field

from bs4 import BeautifulSoup

from ..checks.headings import HEADING_TAGS, find_level_skips, heading_level


@dataclass
class HeadingEntry:
    tag: str  # "H1".."H6"
    text: str
    level: int


@dataclass
class HeadingOutline:
    headings: list[HeadingEntry] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.headings)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total"] = self.total
        return data


def heading_outline(soup: BeautifulSoup) -> HeadingOutline:
    """List every heading in document order and flag outline problems."""
    headings = [
        HeadingEntry(
            tag=h.name.upper(),
            text=h.get_text().strip()[:120],
            level=heading_level(h),
        )
        for h in soup.find_all(HEADING_TAGS)
    ]

    issues = []
    h1_count = sum(1 for h in headings if h.level == 1)
    if h1_count == 0:
        issues.append("No H1 tag found, every page should have exactly one H1")
    if h1_count > 1:
        issues.append(f"Multiple H1 tags found ({h1_count}), use only one H1 per page")
    if headings and headings[0].level != 1:
        issues.append("First heading is not H1, page should start with an H1")

    for i in find_level_skips([h.level for h in headings]):
        prev, cur = headings[i - 1], headings[i]
        issues.append(
            f"Skipped heading level: {prev.tag} → {cur.tag} "
            f'(between "{prev.text[:40]}..." and "{cur.text[:40]}...")'
        )

    counts = {tag.upper(): 0 for tag in HEADING_TAGS}
    for h in headings:
        counts[h.tag] += 1

    return HeadingOutline(headings=headings, issues=issues, counts=counts)
