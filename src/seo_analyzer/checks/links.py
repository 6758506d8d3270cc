"""Check internal/external linking and anchor quality."""

from dataclasses import dataclass
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from ..models import CategoryResult, Check, Status


PLACEHOLDER_HREFS = {"", "#", "javascript:void(0)"}


@dataclass
class LinkStats:
    """Tallies over every <a> on a page."""
    total: int = 0
    internal: int = 0
    external: int = 0
    no_href: int = 0
    nofollow: int = 0
    empty_anchors: int = 0


def is_internal(href: str, base_url: str, base_host: str) -> bool:
    """Resolve href against the page URL and compare host names.

    Hrefs that cannot be parsed are counted as internal.
    """
    try:
        return urlparse(urljoin(base_url, href)).hostname == base_host
    except ValueError:
        return True


def collect_link_stats(soup: BeautifulSoup, base_url: str) -> LinkStats:
    stats = LinkStats()
    base_host = urlparse(base_url).hostname

    for a in soup.find_all("a"):
        stats.total += 1
        href = a.get("href") or ""
        rel = a.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()

        if href in PLACEHOLDER_HREFS:
            stats.no_href += 1
        elif is_internal(href, base_url, base_host):
            stats.internal += 1
        else:
            stats.external += 1

        if "nofollow" in rel:
            stats.nofollow += 1
        if not a.get_text().strip() and not a.find("img"):
            stats.empty_anchors += 1

    return stats


def check_links(soup: BeautifulSoup, base_url: str) -> CategoryResult:
    """Check link counts, placeholder hrefs and empty anchors."""
    checks: list[Check] = []
    stats = collect_link_stats(soup, base_url)

    checks.append(Check(
        name="Total Links",
        status=Status.PASS,
        message=f"{stats.total} links found on the page",
        value=f"Internal: {stats.internal} | External: {stats.external} | Nofollow: {stats.nofollow}",
    ))

    if stats.internal == 0:
        checks.append(Check(
            name="Internal Links",
            status=Status.WARNING,
            message="No internal links found",
            recommendation="Add internal links to improve site navigation and SEO",
        ))
    else:
        checks.append(Check(
            name="Internal Links",
            status=Status.PASS,
            message=f"{stats.internal} internal link(s) found",
        ))

    if stats.no_href:
        checks.append(Check(
            name="Empty/Invalid Links",
            status=Status.WARNING,
            message=f"{stats.no_href} link(s) have no valid href",
            recommendation="Remove or fix links without proper destinations",
        ))
    else:
        checks.append(Check(
            name="Link Validity",
            status=Status.PASS,
            message="All links have valid href attributes",
        ))

    if stats.empty_anchors:
        checks.append(Check(
            name="Anchor Text",
            status=Status.WARNING,
            message=f"{stats.empty_anchors} link(s) have no visible anchor text",
            recommendation="Add descriptive anchor text for better accessibility and SEO",
        ))
    else:
        checks.append(Check(
            name="Anchor Text",
            status=Status.PASS,
            message="All links have visible anchor text or images",
        ))

    return CategoryResult(name="Links", icon="🔗", checks=checks)
