"""Main analyzer that fetches a page and runs all category checks."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
from urllib.parse import urljoin

import httpx

from .checks import (
    check_content,
    check_headings,
    check_images,
    check_links,
    check_meta,
    check_security,
    check_social,
    check_technical,
)
from .config import Settings
from .errors import FetchError
from .fetch import FetchedPage, fetch_page, normalize_url, resource_exists
from .models import AnalysisResult
from .text import parse_html


logger = logging.getLogger(__name__)


def build_report(
    url: str,
    page: FetchedPage,
    sitemap_exists: bool,
    robots_exists: bool,
) -> AnalysisResult:
    """Turn fetched page data into a scored report.

    Pure function: no network access, the page is parsed once and shared by
    every check.

    Args:
        url: Normalized URL that was requested
        page: Fetched body, headers and timing
        sitemap_exists: Whether /sitemap.xml answered with 2xx
        robots_exists: Whether /robots.txt answered with 2xx

    Returns:
        AnalysisResult with all 8 categories
    """
    soup = parse_html(page.html)

    categories = {
        "meta": check_meta(soup, url),
        "headings": check_headings(soup),
        "images": check_images(soup),
        "links": check_links(soup, url),
        "content": check_content(soup),
        "technical": check_technical(soup, sitemap_exists, robots_exists, page.elapsed_ms),
        "social": check_social(soup),
        "security": check_security(url, page.headers),
    }

    title_tag = soup.find("title")
    page_title = title_tag.get_text().strip() if title_tag else ""

    return AnalysisResult(
        url=url,
        final_url=page.final_url or url,
        page_title=page_title or url,
        categories=categories,
    )


def probe_crawl_files(
    url: str,
    client: httpx.Client,
    settings: Settings,
) -> tuple[bool, bool]:
    """Check /sitemap.xml and /robots.txt concurrently.

    Returns (sitemap_exists, robots_exists); failures count as missing.
    """
    sitemap_url = urljoin(url, "/sitemap.xml")
    robots_url = urljoin(url, "/robots.txt")

    with ThreadPoolExecutor(max_workers=2) as executor:
        sitemap = executor.submit(resource_exists, sitemap_url, client, settings)
        robots = executor.submit(resource_exists, robots_url, client, settings)
        return sitemap.result(), robots.result()


def analyze_site(
    url: str,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> AnalysisResult:
    """Run a complete on-page SEO analysis of a URL.

    Args:
        url: The URL to analyze; scheme defaults to https
        settings: Timeouts and headers; defaults from the environment
        client: Optional HTTP client to reuse

    Returns:
        AnalysisResult with all category results

    Raises:
        SiteTimeoutError: the page did not answer in time
        SiteNotFoundError: the host name does not resolve
        FetchError: any other failure fetching or parsing the page
    """
    settings = settings or Settings.from_env()
    url = normalize_url(url)

    if client is not None:
        return _analyze(url, client, settings)
    with httpx.Client(
        headers=settings.headers,
        timeout=settings.timeout,
        follow_redirects=True,
    ) as own_client:
        return _analyze(url, own_client, settings)


def _analyze(url: str, client: httpx.Client, settings: Settings) -> AnalysisResult:
    logger.info("Analyzing %s", url)
    page = fetch_page(url, client, settings)
    sitemap_exists, robots_exists = probe_crawl_files(url, client, settings)

    try:
        result = build_report(url, page, sitemap_exists, robots_exists)
    except Exception as e:
        logger.debug("Report for %s failed", url, exc_info=True)
        raise FetchError(url, str(e) or type(e).__name__) from e
    summary = result.summary
    logger.info(
        "Analysis of %s complete: score %d, %d checks, %d failed",
        url, result.score, summary.total_checks, summary.failed,
    )
    return result
