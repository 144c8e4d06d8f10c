from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright
from playwright_stealth import Stealth  # type: ignore[reportMissingTypeStubs]

from src.constants import BROWSER_SETTLE_MS, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from src.document import Document
from src.errors import FetchError
from src.fetchers.base import BaseFetcher


@contextmanager
def open_browser_page(user_agent: str = DEFAULT_USER_AGENT, headless: bool = True) -> Iterator[Page]:
    """Launches Chromium with stealth patches applied and yields a fresh page."""
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        context = browser.new_context(
            user_agent=user_agent,
            viewport={"width": 1920, "height": 1080},
        )
        Stealth().apply_stealth_sync(context)
        try:
            yield context.new_page()
        finally:
            browser.close()


class BrowserFetcher(BaseFetcher):
    """Fetcher that renders pages in a Playwright page, for sites that need JavaScript."""

    def __init__(self, page: Page, timeout: int = DEFAULT_TIMEOUT, settle_ms: int = BROWSER_SETTLE_MS):
        self.page = page
        self.timeout = timeout
        self.settle_ms = settle_ms

    def fetch(self, url: str) -> Document:
        try:
            response = self.page.goto(url, wait_until="domcontentloaded", timeout=self.timeout * 1000)
        except PlaywrightError as e:
            raise FetchError(url, str(e)) from e

        if response is None:
            raise FetchError(url, "no response received from server")
        if not response.ok:
            raise FetchError(url, f"server error: {response.status}", status_code=response.status)

        # Give the page time to run its JavaScript
        self.page.wait_for_timeout(self.settle_ms)
        return Document(self.page.content(), url=url)
