from typing import Any

from src.fetchers.base import BaseFetcher
from src.fetchers.browser import BrowserFetcher
from src.fetchers.http import RequestsFetcher

# A registry of all available fetchers
FETCHER_REGISTRY: dict[str, type[BaseFetcher]] = {
    "requests": RequestsFetcher,
    "browser": BrowserFetcher,
}


def get_fetcher(fetcher_name: str, **kwargs: Any) -> BaseFetcher:
    """
    Factory function to get a fetcher instance by name.

    Args:
        fetcher_name: The name of the fetcher to get.
        **kwargs: Arguments for the fetcher's constructor.

    Returns:
        An instance of the requested fetcher.

    Raises:
        ValueError: If the fetcher is not found in the registry.
    """
    fetcher_class = FETCHER_REGISTRY.get(fetcher_name)
    if not fetcher_class:
        raise ValueError(f"Unknown fetcher: {fetcher_name}")
    return fetcher_class(**kwargs)
