from abc import ABC, abstractmethod
from urllib.parse import urljoin

from src.constants import NO_EPISODE_TITLE, NO_SEASON_TITLE, NO_SERIE_TITLE
from src.document import Node, nodes_text
from src.fetchers.base import BaseFetcher
from src.providers.types import (
    DownloadRecord,
    EpisodeLink,
    EpisodeRecord,
    SeasonLink,
    SeasonPage,
    SeasonRecord,
    SeriePage,
    SerieRecord,
)
from src.providers.walker import walk_chain
from src.scraper import PageScraper, clean_download_url, clean_url, node_link
from src.utils import Logger


class BaseProvider(ABC):
    """
    Abstract base class for a catalog provider.

    A subclass describes one site: which URLs it handles and the CSS selectors
    of its serie, season and episode pages (``SELECTORS``). Reading pages and
    walking episode chains is shared.

    None of the public ``get_*`` methods raise: every failure is logged and
    turned into None, so a caller always gets a value back.
    """

    SELECTORS: dict[str, dict[str, str]] = {}

    def __init__(self, fetcher: BaseFetcher, logger: Logger | None = None):
        self.logger = logger or Logger()
        self.scraper = PageScraper(fetcher, self.logger)

    @classmethod
    @abstractmethod
    def can_handle_url(cls, url: str) -> bool:
        """
        Check if the provider can handle the given URL.

        Args:
            url: The URL to check.

        Returns:
            True if the provider can handle the URL, False otherwise.
        """
        pass

    @classmethod
    @abstractmethod
    def is_serie_url(cls, url: str) -> bool:
        """Check if the URL points to a serie (or season) page of the site."""
        pass

    @classmethod
    @abstractmethod
    def is_episode_url(cls, url: str) -> bool:
        """Check if the URL points to an episode page of the site."""
        pass

    def get_serie(self, serie_url: str) -> SeriePage | None:
        """
        Get the title of a serie and the links to its seasons.

        Args:
            serie_url: The URL of the serie page.

        Returns:
            The serie page data, or None if the page could not be read.
        """
        try:
            return self._read_serie(serie_url)
        except Exception as e:
            self.logger.error(f"Ошибка при получении сериала {serie_url}: {e}")
            return None

    def get_season(self, season_url: str) -> SeasonPage | None:
        """
        Get the title of a season and the episode links listed on its page.

        The list on the page is newest-first, so ``last_episode`` is its first entry.
        """
        try:
            return self._read_season(season_url)
        except Exception as e:
            self.logger.error(f"Ошибка при получении сезона {season_url}: {e}")
            return None

    def get_episode(self, episode_url: str) -> EpisodeRecord | None:
        """
        Resolve a single episode page.

        Args:
            episode_url: The URL of the episode page.

        Returns:
            The episode with its predecessor links and downloads, or None if the
            page could not be fetched or its selectors could not be queried.
        """
        try:
            return self._resolve_episode(episode_url)
        except Exception as e:
            self.logger.error(f"Ошибка при получении серии {episode_url}: {e}")
            return None

    def get_season_by_previews(
        self,
        season_url: str,
        episode_url_start: str | None = None,
        episode_url_end: str | None = None,
    ) -> SeasonRecord | None:
        """
        Get a complete season by walking back from an episode through "previous" links.

        Args:
            season_url: The URL of the season page.
            episode_url_start: The episode to start from; defaults to the latest
                episode listed on the season page.
            episode_url_end: The oldest episode to include; defaults to walking
                until the chain ends.

        Returns:
            The season with its episodes oldest-first, or None if there is no
            episode to start from.
        """
        try:
            return self._aggregate_season(season_url, episode_url_start, episode_url_end)
        except Exception as e:
            self.logger.error(f"Ошибка при обходе сезона {season_url}: {e}")
            return None

    def get_serie_by_previews(self, serie_url: str) -> SerieRecord | None:
        """
        Get a complete serie, walking every season in page order.

        A season that cannot be walked stays in the result as None, so the
        seasons keep the length and order of the serie page.
        """
        try:
            return self._aggregate_serie(serie_url)
        except Exception as e:
            self.logger.error(f"Ошибка при обходе сериала {serie_url}: {e}")
            return None

    def _read_serie(self, serie_url: str) -> SeriePage | None:
        link = clean_url(serie_url)
        elements = self.scraper.select_elements(link, self.SELECTORS["serie"])
        if elements is None:
            return None

        seasons: list[SeasonLink] = []
        for node in elements["seasons"]:
            season_link = node_link(node, link)
            if season_link:
                seasons.append(SeasonLink(title=node.text(), link=season_link))

        return SeriePage(
            title=self._title(elements["title"], NO_SERIE_TITLE),
            link=link,
            seasons=tuple(seasons),
        )

    def _read_season(self, season_url: str) -> SeasonPage | None:
        link = clean_url(season_url)
        elements = self.scraper.select_elements(link, self.SELECTORS["season"])
        if elements is None:
            return None

        episodes: list[EpisodeLink] = []
        for node in elements["episodes"]:
            episode_link = node_link(node, link)
            if episode_link:
                episodes.append(EpisodeLink(title=node.text(), link=episode_link))

        return SeasonPage(
            title=self._title(elements["title"], NO_SEASON_TITLE),
            link=link,
            last_episode=episodes[0] if episodes else None,
            episodes=tuple(episodes),
        )

    def _resolve_episode(self, episode_url: str) -> EpisodeRecord | None:
        link = clean_url(episode_url)
        elements = self.scraper.select_elements(link, self.SELECTORS["episode"])
        if elements is None:
            return None

        previous_nodes = elements["previous_episode_link"]
        previous_link = node_link(previous_nodes[0], link) if previous_nodes else None

        downloads: list[DownloadRecord] = []
        for node in elements["downloads"]:
            href = node.attr("href")
            if href:
                downloads.append(DownloadRecord(label=node.text(), link=clean_download_url(urljoin(link, href))))

        return EpisodeRecord(
            title=self._title(elements["title"], NO_EPISODE_TITLE),
            link=link,
            previous_link=previous_link,
            previous_button_link=self._previous_button_link(elements["episode_buttons"], link),
            downloads=tuple(downloads),
        )

    def _aggregate_season(self, season_url: str, start: str | None, end: str | None) -> SeasonRecord | None:
        season_page = self.get_season(season_url)
        season_title = season_page.title if season_page else NO_SEASON_TITLE

        seed = start
        if not seed and season_page and season_page.last_episode:
            seed = season_page.last_episode.link
        if not seed:
            self.logger.warning(f"Не найдено ни одной серии для обхода сезона {season_url}")
            return None

        self.logger.info(f"⏪ Обход сезона «{season_title}» начиная с {seed}")
        episodes = walk_chain(seed, clean_url(end), self.get_episode, self.logger)

        return SeasonRecord(
            title=season_title,
            link=clean_url(season_url),
            episodes=tuple(episodes),
            download_links=tuple(episode.best_download_link for episode in episodes),
        )

    def _aggregate_serie(self, serie_url: str) -> SerieRecord | None:
        serie = self.get_serie(serie_url)
        if serie is None:
            return None

        seasons: list[SeasonRecord | None] = []
        for index, season in enumerate(serie.seasons, start=1):
            self.logger.info(f"--- Сезон {index}/{len(serie.seasons)}: {season.title} ---")
            seasons.append(self.get_season_by_previews(season.link))

        return SerieRecord(title=serie.title, link=serie.link, seasons=tuple(seasons))

    @staticmethod
    def _title(nodes: list[Node], placeholder: str) -> str:
        return nodes_text(nodes) if nodes else placeholder

    @staticmethod
    def _previous_button_link(buttons: list[Node], episode_link: str) -> str | None:
        """
        The link of the button right after the current episode's button.

        Buttons are listed newest-first, so the next one is the previous episode.
        """
        current_index = None
        for index, button in enumerate(buttons):
            if node_link(button, episode_link) == episode_link:
                current_index = index

        if current_index is None or current_index + 1 >= len(buttons):
            return None
        return node_link(buttons[current_index + 1], episode_link)
