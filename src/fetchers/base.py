from abc import ABC, abstractmethod

from src.document import Document


class BaseFetcher(ABC):
    """Abstract base class for a page fetcher."""

    @abstractmethod
    def fetch(self, url: str) -> Document:
        """
        Fetch a single page and parse it.

        Args:
            url: The URL of the page to fetch.

        Returns:
            The parsed page.

        Raises:
            FetchError: If the host is unreachable, answers with a non-2xx
                status, or sends no response at all.
        """
        pass
