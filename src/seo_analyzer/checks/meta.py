"""Check meta tags in the document head."""

from bs4 import BeautifulSoup

from ..models import CategoryResult, Check, Status


def meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    """Trimmed ``content`` of the first matching <meta>, or ""."""
    tag = soup.find("meta", attrs=attrs)
    if not tag:
        return ""
    return (tag.get("content") or "").strip()


def check_meta(soup: BeautifulSoup, url: str) -> CategoryResult:
    """Check title, description and the other head meta tags.

    Key tags for search engines:
    - title: 30-60 characters
    - description: 120-160 characters
    - viewport and charset: mobile rendering, encoding
    - robots: must not block indexing
    - canonical: avoid duplicate content
    """
    checks: list[Check] = []

    # Title
    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if title_tag else ""

    if not title:
        checks.append(Check(
            name="Page Title",
            status=Status.FAIL,
            message="Page title is missing",
            recommendation="Add a <title> tag between 50-60 characters",
        ))
    elif len(title) < 30:
        checks.append(Check(
            name="Page Title",
            status=Status.WARNING,
            message=f"Title is too short ({len(title)} chars)",
            value=title,
            recommendation="Title should be 50-60 characters for optimal SEO",
        ))
    elif len(title) > 60:
        checks.append(Check(
            name="Page Title",
            status=Status.WARNING,
            message=f"Title is too long ({len(title)} chars) and may be truncated in search results",
            value=title,
            recommendation="Keep title under 60 characters",
        ))
    else:
        checks.append(Check(
            name="Page Title",
            status=Status.PASS,
            message=f"Title is optimal ({len(title)} chars)",
            value=title,
        ))

    # Meta description
    description = meta_content(soup, name="description")

    if not description:
        checks.append(Check(
            name="Meta Description",
            status=Status.FAIL,
            message="Meta description is missing",
            recommendation="Add a meta description between 150-160 characters",
        ))
    elif len(description) < 120:
        checks.append(Check(
            name="Meta Description",
            status=Status.WARNING,
            message=f"Description is too short ({len(description)} chars)",
            value=description,
            recommendation="Description should be 150-160 characters",
        ))
    elif len(description) > 160:
        checks.append(Check(
            name="Meta Description",
            status=Status.WARNING,
            message=f"Description may be truncated ({len(description)} chars)",
            value=description,
            recommendation="Keep under 160 characters",
        ))
    else:
        checks.append(Check(
            name="Meta Description",
            status=Status.PASS,
            message=f"Description is optimal ({len(description)} chars)",
            value=description,
        ))

    # Viewport
    viewport = meta_content(soup, name="viewport")
    if viewport:
        checks.append(Check(
            name="Viewport Meta",
            status=Status.PASS,
            message="Viewport meta tag is set",
            value=viewport,
        ))
    else:
        checks.append(Check(
            name="Viewport Meta",
            status=Status.FAIL,
            message="Viewport meta tag is missing, site may not be mobile-friendly",
            recommendation='Add <meta name="viewport" content="width=device-width, initial-scale=1">',
        ))

    # Charset
    has_charset = bool(
        soup.find("meta", charset=True)
        or soup.find("meta", attrs={"http-equiv": "Content-Type"})
    )
    if has_charset:
        checks.append(Check(
            name="Charset Declaration",
            status=Status.PASS,
            message="Character encoding is declared",
        ))
    else:
        checks.append(Check(
            name="Charset Declaration",
            status=Status.WARNING,
            message="No explicit charset declaration found",
            recommendation='Add <meta charset="UTF-8"> to <head>',
        ))

    # Robots directive
    robots = meta_content(soup, name="robots")
    if "noindex" in robots:
        checks.append(Check(
            name="Robots Meta",
            status=Status.WARNING,
            message="Page is set to noindex and will NOT appear in search results",
            value=robots,
            recommendation="Remove noindex unless the page should stay out of search",
        ))
    else:
        checks.append(Check(
            name="Robots Meta",
            status=Status.PASS,
            message=f"Robots directive: {robots}" if robots else "No restrictive robots meta (page is indexable)",
            value=robots or None,
        ))

    # Canonical URL
    canonical = soup.find("link", rel="canonical")
    canonical_href = (canonical.get("href") or "") if canonical else ""
    if canonical_href:
        checks.append(Check(
            name="Canonical URL",
            status=Status.PASS,
            message="Canonical URL is set",
            value=canonical_href,
        ))
    else:
        checks.append(Check(
            name="Canonical URL",
            status=Status.WARNING,
            message="No canonical URL, may cause duplicate content issues",
            recommendation="Add a canonical link to specify the preferred URL",
        ))

    return CategoryResult(name="Meta Tags", icon="🏷️", checks=checks)
