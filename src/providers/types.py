import re
from dataclasses import asdict, dataclass
from typing import Any

from src.constants import QUALITY_PATTERN


class _Record:
    def to_dict(self) -> dict[str, Any]:
        """Plain-data representation, ready for JSON serialization."""

        return asdict(self)  # type: ignore


@dataclass(frozen=True)
class DownloadRecord(_Record):
    """A single download mirror of an episode."""

    label: str
    link: str

    @property
    def quality(self) -> str | None:
        """The quality tag (e.g. "720p") found in the label, if any."""

        match = re.search(QUALITY_PATTERN, self.label)
        return match.group(0) if match else None


@dataclass(frozen=True)
class EpisodeLink(_Record):
    """An episode entry as listed on a season page."""

    title: str
    link: str


@dataclass(frozen=True)
class SeasonLink(_Record):
    """A season entry as listed on a serie page."""

    title: str
    link: str


@dataclass(frozen=True)
class EpisodeRecord(_Record):
    """
    A resolved episode page.

    ``link`` is the identity of the episode. ``previous_link`` comes from the
    page's explicit "previous episode" element, ``previous_button_link`` from
    the position of the episode in the button list. Either may be missing.
    """

    title: str
    link: str
    previous_link: str | None = None
    previous_button_link: str | None = None
    downloads: tuple[DownloadRecord, ...] = ()

    @property
    def best_download_link(self) -> str | None:
        return self.downloads[0].link if self.downloads else None


@dataclass(frozen=True)
class SeasonPage(_Record):
    """A season page read on its own, without walking the episodes."""

    title: str
    link: str
    last_episode: EpisodeLink | None = None
    episodes: tuple[EpisodeLink, ...] = ()


@dataclass(frozen=True)
class SeasonRecord(_Record):
    """A season with its episodes in chronological order (oldest first)."""

    title: str
    link: str
    episodes: tuple[EpisodeRecord, ...] = ()
    download_links: tuple[str | None, ...] = ()


@dataclass(frozen=True)
class SeriePage(_Record):
    """A serie page read on its own: title and season links in page order."""

    title: str
    link: str
    seasons: tuple[SeasonLink, ...] = ()


@dataclass(frozen=True)
class SerieRecord(_Record):
    """A serie with every season aggregated; failed seasons are kept as None."""

    title: str
    link: str
    seasons: tuple[SeasonRecord | None, ...] = ()
