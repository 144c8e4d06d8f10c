from src.fetchers.base import BaseFetcher
from src.providers.base import BaseProvider
from src.providers.wecima import WeCimaProvider
from src.utils import Logger

# A registry of all available providers
PROVIDER_REGISTRY: list[type[BaseProvider]] = [
    WeCimaProvider,
]


def get_provider(url: str, fetcher: BaseFetcher, logger: Logger | None = None) -> BaseProvider:
    """
    Factory function to get a provider instance based on the URL.

    Args:
        url: The URL of a serie, season or episode page.
        fetcher: The fetcher the provider loads pages with.
        logger: The logger for progress and failures.

    Returns:
        An instance of the appropriate provider.

    Raises:
        ValueError: If no suitable provider is found for the given URL.
    """
    for provider_class in PROVIDER_REGISTRY:
        if provider_class.can_handle_url(url):
            return provider_class(fetcher, logger)
    raise ValueError(f"No suitable provider found for URL: {url}")
