"""Exceptions raised while fetching and reading catalog pages."""


class ScraperError(Exception):
    """Base class for all scraping failures."""


class FetchError(ScraperError):
    """A page could not be retrieved (unreachable host, non-2xx status, no response)."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class ExtractionError(ScraperError):
    """A selector could not be queried at all on a fetched page."""

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        self.reason = reason
        super().__init__(f"Failed to query selector '{selector}': {reason}")
