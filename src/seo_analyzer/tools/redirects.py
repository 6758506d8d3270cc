"""Follow a URL's redirect chain hop by hop."""

import logging
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urljoin

import httpx

from ..config import Settings
from ..errors import FetchError
from ..fetch import send


logger = logging.getLogger(__name__)

REDIRECT_STATUSES = {301, 302, 303, 307, 308}
LOOP_DETECTED = "LOOP DETECTED"

HOP_TYPES = {
    301: "Permanent (301)",
    302: "Temporary (302)",
    307: "Temporary (307)",
    308: "Permanent (308)",
}


def classify_status(status: int) -> str:
    return HOP_TYPES.get(status, f"Response ({status})")


@dataclass
class RedirectHop:
    """One request in the chain."""
    url: str
    status: int
    type: str


@dataclass
class RedirectReport:
    """Full redirect chain from the start URL."""
    chain: list[RedirectHop] = field(default_factory=list)

    @property
    def total_redirects(self) -> int:
        return len(self.chain) - 1

    @property
    def has_loop(self) -> bool:
        return any(hop.type == LOOP_DETECTED for hop in self.chain)

    @property
    def final_url(self) -> str:
        return self.chain[-1].url

    @property
    def final_status(self) -> int:
        return self.chain[-1].status

    def to_dict(self) -> dict:
        return {
            "chain": [{"url": h.url, "status": h.status, "type": h.type} for h in self.chain],
            "total_redirects": self.total_redirects,
            "has_loop": self.has_loop,
            "final_url": self.final_url,
            "final_status": self.final_status,
        }


def resolve_location(location: str, current_url: str) -> Optional[str]:
    """Absolute redirect target, or None if the Location header is unusable."""
    try:
        target = urljoin(current_url, location.strip())
    except ValueError:
        return None
    if not target.startswith(("http://", "https://")):
        return None
    return target


def trace_redirects(
    url: str,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> RedirectReport:
    """Request each hop without following redirects and record the chain.

    Stops at the first non-redirect answer, a missing or unusable Location
    header, a loop back to an earlier URL, or after ``max_redirects`` requests.

    Raises:
        SiteTimeoutError, SiteNotFoundError, FetchError: a hop could not be fetched
    """
    settings = settings or Settings.from_env()
    if client is None:
        with httpx.Client(headers=settings.headers, timeout=settings.redirect_timeout) as own_client:
            return trace_redirects(url, own_client, settings)

    # httpx builds the next request even when not following it, and raises on
    # a Location it cannot parse; the hook keeps the response that was received
    received: list[httpx.Response] = []
    hook = received.append
    client.event_hooks["response"].append(hook)
    try:
        return _follow_chain(url, client, settings, received)
    finally:
        client.event_hooks["response"].remove(hook)


def _follow_chain(
    url: str,
    client: httpx.Client,
    settings: Settings,
    received: list[httpx.Response],
) -> RedirectReport:
    report = RedirectReport()
    current_url = url

    for _ in range(settings.max_redirects):
        received.clear()
        try:
            response = send(client, current_url, settings.redirect_timeout, follow_redirects=False)
        except FetchError as e:
            if not received:
                raise
            status = received[-1].status_code
            report.chain.append(RedirectHop(url=current_url, status=status, type=classify_status(status)))
            logger.debug("Unusable Location header at %s, stopping: %s", current_url, e)
            break

        status = response.status_code
        location = response.headers.get("location")
        report.chain.append(RedirectHop(url=current_url, status=status, type=classify_status(status)))
        logger.debug("%s -> %s (%s)", current_url, status, location)

        if status not in REDIRECT_STATUSES or not location:
            break

        next_url = resolve_location(location, current_url)
        if next_url is None:
            logger.debug("Unusable Location header %r, stopping", location)
            break
        current_url = next_url

        # The hop just recorded is the one that pointed here; skip it
        if any(hop.url == current_url for hop in report.chain[:-1]):
            report.chain.append(RedirectHop(url=current_url, status=0, type=LOOP_DETECTED))
            break

    return report
