import re
from collections.abc import Mapping
from urllib.parse import unquote, urljoin

from src.constants import MP4_HTML_PATTERN
from src.document import Document, Node
from src.errors import ExtractionError, FetchError
from src.fetchers.base import BaseFetcher
from src.utils import Logger


def clean_url(url: str | None) -> str | None:
    """Decodes percent-encoding so that links compare equal regardless of how the page wrote them."""
    if url is None:
        return None
    return unquote(url)


def clean_download_url(url: str) -> str:
    """Collapses the styled ".mp4.html" wrapper to the real ".mp4" file and decodes the result."""
    return unquote(re.sub(MP4_HTML_PATTERN, ".mp4", url, flags=re.IGNORECASE))


def node_link(node: Node, base_url: str) -> str | None:
    """Normalized absolute href of a node, or None if it has no usable href."""
    href = node.attr("href")
    if not href:
        return None
    return clean_url(urljoin(base_url, href))


def select_elements(document: Document, selectors: Mapping[str, str]) -> dict[str, list[Node]]:
    """
    Runs every named selector against a document.

    Args:
        document: The parsed page.
        selectors: A mapping of field name to CSS selector.

    Returns:
        A mapping of field name to the (possibly empty) list of matched nodes.

    Raises:
        ExtractionError: If any selector cannot be evaluated.
    """
    return {name: document.select(selector) for name, selector in selectors.items()}


class PageScraper:
    """Fetches pages and picks named elements out of them, logging every failure."""

    def __init__(self, fetcher: BaseFetcher, logger: Logger):
        self.fetcher = fetcher
        self.logger = logger

    def fetch_page(self, url: str) -> Document | None:
        self.logger.info(f"📄 Загрузка страницы: {url}")
        try:
            document = self.fetcher.fetch(url)
        except FetchError as e:
            self.logger.error(f"Не удалось загрузить страницу {e.url}: {e.reason}", indent=1)
            return None
        self.logger.success("Страница загружена", indent=1)
        return document

    def select_elements(self, url: str, selectors: Mapping[str, str]) -> dict[str, list[Node]] | None:
        """Fetches a page and selects elements from it; None if either step fails."""
        document = self.fetch_page(url)
        if document is None:
            return None

        try:
            return select_elements(document, selectors)
        except ExtractionError as e:
            self.logger.error(f"Не удалось выбрать элементы на {document.url}: {e}", indent=1)
            return None
