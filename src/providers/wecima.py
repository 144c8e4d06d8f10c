import re

from src.constants import (
    WECIMA_EPISODE_URL_PATTERN,
    WECIMA_HOST_PATTERN,
    WECIMA_SELECTORS,
    WECIMA_SERIE_URL_PATTERN,
)
from src.providers.base import BaseProvider
from src.scraper import clean_url


class WeCimaProvider(BaseProvider):
    """Provider for wecima.film and its mycima mirrors."""

    SELECTORS = WECIMA_SELECTORS

    @classmethod
    def can_handle_url(cls, url: str) -> bool:
        """Check if the provider can handle the given URL."""

        return re.match(WECIMA_HOST_PATTERN, clean_url(url) or "", re.IGNORECASE) is not None

    @classmethod
    def is_serie_url(cls, url: str) -> bool:
        return cls.can_handle_url(url) and re.match(WECIMA_SERIE_URL_PATTERN, url, re.IGNORECASE) is not None

    @classmethod
    def is_episode_url(cls, url: str) -> bool:
        return cls.can_handle_url(url) and re.match(WECIMA_EPISODE_URL_PATTERN, url, re.IGNORECASE) is not None
