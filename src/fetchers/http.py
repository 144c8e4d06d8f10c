import requests

from src.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from src.document import Document
from src.errors import FetchError
from src.fetchers.base import BaseFetcher


class RequestsFetcher(BaseFetcher):
    """Fetcher that downloads pages with a requests session."""

    def __init__(self, session: requests.Session | None = None, timeout: int = DEFAULT_TIMEOUT):
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": DEFAULT_USER_AGENT})
        self.session = session
        self.timeout = timeout

    def fetch(self, url: str) -> Document:
        """Performs a single GET request; there is no retry on failure."""
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise FetchError(url, f"server error: {status_code}", status_code=status_code) from e
        except requests.exceptions.RequestException as e:
            raise FetchError(url, str(e)) from e

        return Document(response.text, url=url)
