"""
Backward traversal of an episode chain.

Episode pages only point backwards, from the latest episode towards the first
one, and through two signals that are each occasionally missing. The walker
follows them newest-first and hands back the episodes oldest-first.
"""

from collections.abc import Callable
from typing import TypeVar

from src.providers.types import EpisodeRecord
from src.utils import Logger

T = TypeVar("T")


def first_non_null(primary: T | None, secondary: T | None) -> T | None:
    """Returns the primary value unless it is missing, in which case the secondary one."""
    return primary if primary is not None else secondary


def previous_episode_link(record: EpisodeRecord) -> str | None:
    """The explicit "previous episode" link wins over the position in the button list."""
    return first_non_null(record.previous_link, record.previous_button_link)


def walk_chain(
    seed: str | None,
    end: str | None,
    resolve: Callable[[str], EpisodeRecord | None],
    logger: Logger | None = None,
) -> list[EpisodeRecord]:
    """
    Walks an episode chain backwards from a seed episode.

    Args:
        seed: Link of the episode to start from (usually the latest one).
        end: Link of the oldest episode to include, or None to walk to the start.
        resolve: Turns an episode link into a record, or None if it cannot be read.
        logger: Optional logger for walk progress.

    Returns:
        The collected episodes, oldest first. A walk that cannot even resolve its
        seed returns an empty list; a dead end in the middle returns what was
        collected so far.
    """
    collected: list[EpisodeRecord] = []
    visited: set[str] = set()
    current = seed

    while current:
        record = resolve(current)
        if record is None:
            if logger:
                logger.warning(f"Цепочка оборвана на {current}", indent=1)
            break

        collected.append(record)
        visited.add(record.link)

        if end is not None and record.link == end:
            break

        current = previous_episode_link(record)
        if current in visited:
            if logger:
                logger.warning(f"Обнаружен цикл: {current} уже пройдена. Остановка.", indent=1)
            break

    if logger:
        logger.info(f"🔗 Найдено серий в цепочке: {len(collected)}", indent=1)

    collected.reverse()
    return collected
