"""Technical checks: document setup, crawl files and server speed."""

from bs4 import BeautifulSoup

from ..models import CategoryResult, Check, Status


FAVICON_SELECTOR = 'link[rel="icon"], link[rel="shortcut icon"], link[rel="apple-touch-icon"]'
MAX_INLINE_STYLES = 20
FAST_RESPONSE_MS = 2000
SLOW_RESPONSE_MS = 5000


def check_technical(
    soup: BeautifulSoup,
    sitemap_exists: bool,
    robots_exists: bool,
    response_time_ms: int,
) -> CategoryResult:
    """Check technical factors that affect crawling and rendering.

    Key factors:
    - DOCTYPE and lang attribute
    - favicon
    - sitemap.xml and robots.txt (probed by the caller)
    - JSON-LD structured data
    - inline style overuse
    - server response time
    """
    checks: list[Check] = []

    # str() of the parsed document keeps the doctype declaration
    if "<!doctype" in str(soup).lower():
        checks.append(Check(
            name="DOCTYPE",
            status=Status.PASS,
            message="HTML DOCTYPE is declared",
        ))
    else:
        checks.append(Check(
            name="DOCTYPE",
            status=Status.WARNING,
            message="DOCTYPE declaration not found",
            recommendation="Start the document with <!DOCTYPE html>",
        ))

    html_tag = soup.find("html")
    lang = (html_tag.get("lang") or "") if html_tag else ""
    if lang:
        checks.append(Check(
            name="Language Attribute",
            status=Status.PASS,
            message=f'Language is set to "{lang}"',
            value=lang,
        ))
    else:
        checks.append(Check(
            name="Language Attribute",
            status=Status.WARNING,
            message="No lang attribute on <html>, may affect accessibility",
            recommendation='Add lang attribute: <html lang="en">',
        ))

    if soup.select_one(FAVICON_SELECTOR):
        checks.append(Check(
            name="Favicon",
            status=Status.PASS,
            message="Favicon is set",
        ))
    else:
        checks.append(Check(
            name="Favicon",
            status=Status.WARNING,
            message="No favicon found, site may look unprofessional in browser tabs",
            recommendation="Add a favicon link in <head>",
        ))

    if sitemap_exists:
        checks.append(Check(
            name="Sitemap.xml",
            status=Status.PASS,
            message="Sitemap.xml is accessible",
        ))
    else:
        checks.append(Check(
            name="Sitemap.xml",
            status=Status.WARNING,
            message="Sitemap.xml not found",
            recommendation="Create a sitemap.xml to help search engines discover your pages",
        ))

    if robots_exists:
        checks.append(Check(
            name="Robots.txt",
            status=Status.PASS,
            message="Robots.txt is accessible",
        ))
    else:
        checks.append(Check(
            name="Robots.txt",
            status=Status.WARNING,
            message="Robots.txt not found",
            recommendation="Create a robots.txt to control search engine crawling",
        ))

    json_ld = soup.find_all("script", type="application/ld+json")
    if json_ld:
        checks.append(Check(
            name="Structured Data",
            status=Status.PASS,
            message=f"{len(json_ld)} structured data block(s) found (JSON-LD)",
        ))
    else:
        checks.append(Check(
            name="Structured Data",
            status=Status.WARNING,
            message="No structured data (JSON-LD) found",
            recommendation="Add JSON-LD structured data for rich search results",
        ))

    inline_styles = len(soup.find_all(style=True))
    if inline_styles > MAX_INLINE_STYLES:
        checks.append(Check(
            name="Inline Styles",
            status=Status.WARNING,
            message=f"{inline_styles} elements have inline styles, consider external CSS",
            recommendation="Move inline styles into a stylesheet",
        ))
    else:
        checks.append(Check(
            name="Inline Styles",
            status=Status.PASS,
            message=f"{inline_styles} inline style(s) found, acceptable",
        ))

    if response_time_ms < FAST_RESPONSE_MS:
        status = Status.PASS
    elif response_time_ms < SLOW_RESPONSE_MS:
        status = Status.WARNING
    else:
        status = Status.FAIL
    checks.append(Check(
        name="Response Time",
        status=status,
        message=f"Server responded in {response_time_ms}ms",
        value=f"{response_time_ms}ms",
        recommendation=None if status == Status.PASS else "Improve server response time, aim for under 2 seconds",
    ))

    return CategoryResult(name="Technical", icon="⚙️", checks=checks)
