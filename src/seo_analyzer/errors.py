"""Exceptions raised at the analysis boundary."""


class AnalysisError(Exception):
    """Base class for failures that abort an analysis."""


class SiteTimeoutError(AnalysisError):
    """The site did not respond before the deadline."""

    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout
        super().__init__(
            f"{url} took too long to respond (no answer after {timeout:g}s)"
        )


class SiteNotFoundError(AnalysisError):
    """The host name could not be resolved."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Website not found: {url}. Check the URL and try again.")


class FetchError(AnalysisError):
    """Any other failure while fetching a page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to analyze {url}: {reason}")


class UnknownToolError(AnalysisError):
    """Requested tool name is not registered."""
