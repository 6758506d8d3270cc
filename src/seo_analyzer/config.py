"""Runtime settings, read from the environment with sane defaults."""

import os
from dataclasses import dataclass


DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SEOAnalyzerBot/1.0; +https://github.com/seo-analyzer/seo-analyzer)"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Timeouts (seconds) and identity used for outbound requests."""
    timeout: float = 15.0  # primary page fetch
    probe_timeout: float = 5.0  # sitemap.xml / robots.txt probes
    redirect_timeout: float = 10.0  # each redirect hop
    max_redirects: int = 10
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from SEO_ANALYZER_* environment variables."""
        return cls(
            timeout=_env_float("SEO_ANALYZER_TIMEOUT", cls.timeout),
            probe_timeout=_env_float("SEO_ANALYZER_PROBE_TIMEOUT", cls.probe_timeout),
            redirect_timeout=_env_float("SEO_ANALYZER_REDIRECT_TIMEOUT", cls.redirect_timeout),
            user_agent=os.getenv("SEO_ANALYZER_USER_AGENT") or DEFAULT_USER_AGENT,
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
