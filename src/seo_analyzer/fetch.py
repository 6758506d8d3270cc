"""Page fetching and URL normalization."""

import logging
import socket
import time
from dataclasses import dataclass, field
from typing import Optional

import httpx

from .config import Settings
from .errors import FetchError, SiteNotFoundError, SiteTimeoutError


logger = logging.getLogger(__name__)

# Fragments of resolver errors across platforms
DNS_ERROR_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "getaddrinfo failed",
    "enotfound",
)


@dataclass
class FetchedPage:
    """A fetched page as seen by the checks."""
    html: str
    headers: dict[str, str] = field(default_factory=dict)  # lowercased names
    status: int = 200
    elapsed_ms: int = 0
    final_url: str = ""


def ensure_scheme(url: str) -> str:
    """Trim the URL and default to https:// when no scheme is given."""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme and drop a single trailing slash."""
    url = ensure_scheme(url)
    if url.endswith("/"):
        url = url[:-1]
    return url


def is_dns_failure(exc: BaseException) -> bool:
    """Check whether a connection error came from host name resolution."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, socket.gaierror):
            return True
        message = str(current).lower()
        if any(marker in message for marker in DNS_ERROR_MARKERS):
            return True
        current = current.__cause__ or current.__context__
    return False


def lowercase_headers(headers: httpx.Headers) -> dict[str, str]:
    """Flatten response headers, joining repeated names with commas."""
    return {name.lower(): headers[name] for name in headers.keys()}


def _client(settings: Settings, timeout: float, follow_redirects: bool) -> httpx.Client:
    return httpx.Client(
        headers=settings.headers,
        timeout=timeout,
        follow_redirects=follow_redirects,
    )


def send(
    client: httpx.Client,
    url: str,
    timeout: float,
    follow_redirects: bool = True,
) -> httpx.Response:
    """GET a URL, translating transport failures into analysis errors."""
    try:
        return client.get(url, timeout=timeout, follow_redirects=follow_redirects)
    except httpx.TimeoutException as e:
        raise SiteTimeoutError(url, timeout) from e
    except httpx.ConnectError as e:
        if is_dns_failure(e):
            raise SiteNotFoundError(url) from e
        raise FetchError(url, str(e) or "connection failed") from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise FetchError(url, str(e) or type(e).__name__) from e


def fetch_page(
    url: str,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> FetchedPage:
    """Fetch a page, following redirects.

    HTTP error statuses are not raised; error pages are still analyzed.

    Args:
        url: Absolute URL to fetch
        client: Optional client to reuse (its transport is honored)
        settings: Timeouts and headers; defaults from the environment

    Returns:
        FetchedPage with body, lowercased headers, status and elapsed time

    Raises:
        SiteTimeoutError, SiteNotFoundError, FetchError
    """
    settings = settings or Settings.from_env()
    if client is None:
        with _client(settings, settings.timeout, follow_redirects=True) as own_client:
            return fetch_page(url, own_client, settings)

    start_time = time.time()
    response = send(client, url, settings.timeout)
    elapsed_ms = int((time.time() - start_time) * 1000)
    logger.debug("Fetched %s -> %s in %dms", url, response.status_code, elapsed_ms)

    return FetchedPage(
        html=response.text,
        headers=lowercase_headers(response.headers),
        status=response.status_code,
        elapsed_ms=elapsed_ms,
        final_url=str(response.url),
    )


def resource_exists(
    url: str,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> bool:
    """Probe a URL; True only for a 2xx answer. Never raises."""
    settings = settings or Settings.from_env()
    if client is None:
        with _client(settings, settings.probe_timeout, follow_redirects=True) as own_client:
            return resource_exists(url, own_client, settings)

    try:
        response = client.get(url, timeout=settings.probe_timeout, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Probe of %s failed: %s", url, e)
        return False
    return response.is_success
