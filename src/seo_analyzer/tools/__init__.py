"""Single-purpose page tools."""

from typing import Any, Callable, Optional

import httpx

from ..config import Settings
from ..errors import UnknownToolError
from ..fetch import ensure_scheme, fetch_page
from ..text import parse_html
from .keywords import KeywordReport, keyword_density
from .outline import HeadingOutline, heading_outline
from .readability import ReadabilityReport, readability
from .redirects import RedirectReport, trace_redirects
from .social_preview import SocialPreview, social_preview

__all__ = [
    "TOOL_NAMES",
    "run_tool",
    "keyword_density",
    "heading_outline",
    "readability",
    "trace_redirects",
    "social_preview",
    "KeywordReport",
    "HeadingOutline",
    "ReadabilityReport",
    "RedirectReport",
    "SocialPreview",
]

# Tools that work on the fetched page body
PAGE_TOOLS: dict[str, Callable[[Any, str], Any]] = {
    "social-preview": lambda soup, url: social_preview(soup, url),
    "keyword-density": lambda soup, url: keyword_density(soup),
    "readability": lambda soup, url: readability(soup),
    "heading-structure": lambda soup, url: heading_outline(soup),
}

TOOL_NAMES = ["redirect-check", *PAGE_TOOLS]


def run_tool(
    name: str,
    url: str,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
):
    """Run a tool by name against a URL.

    Returns the tool's report object; each has a ``to_dict()``.

    Raises:
        UnknownToolError: name is not one of TOOL_NAMES
        SiteTimeoutError, SiteNotFoundError, FetchError: the page could not be fetched
    """
    if name not in TOOL_NAMES:
        raise UnknownToolError(f"Unknown tool: {name}. Choose from {', '.join(TOOL_NAMES)}")

    url = ensure_scheme(url)
    if name == "redirect-check":
        return trace_redirects(url, client, settings)

    page = fetch_page(url, client, settings)
    return PAGE_TOOLS[name](parse_html(page.html), url)
