from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from src.errors import ExtractionError


class Node:
    """A matched element, exposing only attribute and text access."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def attr(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        # Multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def text(self) -> str:
        return self._tag.get_text(" ", strip=True)


class Document:
    """A parsed HTML page that can be queried with CSS selectors."""

    def __init__(self, html: str | bytes, url: str = ""):
        self.url = url
        self._soup = BeautifulSoup(html, "html.parser")

    def select(self, selector: str) -> list[Node]:
        """
        Return every element matching a CSS selector, in document order.

        Raises:
            ExtractionError: If the selector cannot be evaluated at all.
        """
        try:
            tags = self._soup.select(selector)
        except (SelectorSyntaxError, NotImplementedError) as e:
            raise ExtractionError(selector, str(e)) from e
        return [Node(tag) for tag in tags]


def nodes_text(nodes: Iterable[Node]) -> str:
    """Text of all nodes joined together."""

    return " ".join(text for text in (node.text() for node in nodes) if text)
