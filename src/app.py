import json
import os
import re
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any
from urllib.parse import urlparse

import browser_cookie3  # type: ignore
import requests
from playwright.sync_api import Error as PlaywrightError

from src.config import get_settings, load_config
from src.constants import DEFAULT_CONFIG_PATH, DEFAULT_USER_AGENT
from src.fetchers import get_fetcher
from src.fetchers.base import BaseFetcher
from src.fetchers.browser import open_browser_page
from src.providers import get_provider
from src.providers.base import BaseProvider
from src.providers.types import EpisodeRecord, SeasonRecord, SerieRecord
from src.utils import Logger, log

CatalogResult = SerieRecord | SeasonRecord | EpisodeRecord


def run_export(config_path: str = DEFAULT_CONFIG_PATH) -> int:
    """
    Runs every catalog job from the config file.

    Returns:
        The number of jobs that failed (1 if the config file is missing).
    """
    config_data = load_config(config_path)
    if not config_data:
        log(f"❌ Файл {config_path} не найден. Пропускаю экспорт.")
        return 1

    settings = get_settings(config_data)
    logger = Logger(bool(settings["display_info"]))
    jobs = config_data.get("catalog") or []

    if not jobs:
        log("⚠️ В конфиге не найдено ни одного каталога для экспорта.")
        return 0

    failures = 0
    for job in jobs:
        log(f"--- Работа с каталогом: {job.get('name', job.get('url'))} ---", top=1)
        if not _process_single_job(job, settings, logger):
            failures += 1

    return failures


def _handle_cookies(
    session: requests.Session,
    cookie_settings: dict[str, Any],
    url: str,
) -> None:
    """Handles loading cookies into the requests session."""
    if cookie_settings.get("enable", False):
        try:
            domain = urlparse(url).netloc
            if not domain:
                log("⚠️ Не удалось извлечь домен из URL. Пропускаю загрузку cookies.", indent=1)
                return

            browser = cookie_settings.get("browser", "firefox")
            log(f"🍪 Загрузка cookies для домена '{domain}' из {browser}...", indent=1)
            cj = getattr(browser_cookie3, browser)(domain_name=domain)
            session.cookies.update(cj)  # type: ignore
            log("✅ Cookies успешно загружены.", indent=1)
        except Exception as e:
            log(f"❌ Не удалось загрузить cookies: {e}", indent=1)


@contextmanager
def _open_fetcher(settings: dict[str, Any], url: str) -> Iterator[BaseFetcher]:
    """Opens the configured fetcher for one job and releases its session or browser afterwards."""
    fetcher_name = settings["fetcher"]
    timeout = settings["timeout"]

    if fetcher_name == "browser":
        with open_browser_page(user_agent=DEFAULT_USER_AGENT) as page:
            yield get_fetcher(fetcher_name, page=page, timeout=timeout)
        return

    with requests.Session() as session:
        session.headers.update({"User-Agent": DEFAULT_USER_AGENT})
        _handle_cookies(session, settings.get("cookies") or {}, url)
        yield get_fetcher(fetcher_name, session=session, timeout=timeout)


def _infer_kind(provider: BaseProvider, url: str) -> str:
    """
    Picks the catalog kind from the URL shape.

    Season URLs look like serie URLs, so season jobs have to declare their kind.

    Raises:
        ValueError: If the URL is neither an episode nor a serie page.
    """
    if provider.is_episode_url(url):
        return "episode"
    if provider.is_serie_url(url):
        return "serie"
    raise ValueError(f"Unknown catalog kind for URL: {url}")


def _run_job(provider: BaseProvider, kind: str, job: dict[str, Any]) -> CatalogResult | None:
    url = job["url"]
    if kind == "serie":
        return provider.get_serie_by_previews(url)
    if kind == "season":
        return provider.get_season_by_previews(url, job.get("start"), job.get("end"))
    if kind == "episode":
        return provider.get_episode(url)
    raise ValueError(f"Unknown catalog kind: {kind}")


def _catalog_filename(name: str) -> str:
    slug = re.sub(r"[^\w\-]+", "_", name).strip("_")
    return f"{slug or 'catalog'}.json"


def _write_catalog(result: CatalogResult, output_dir: str, name: str) -> str:
    """Saves a catalog as pretty-printed UTF-8 JSON and returns its path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, _catalog_filename(name))
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
    return path


def _process_single_job(job: dict[str, Any], settings: dict[str, Any], logger: Logger) -> bool:
    """Builds one catalog and writes it to disk. Returns True on success."""
    url = job.get("url")
    if not url:
        log("❌ У каталога не указан URL.", indent=1)
        return False

    try:
        with _open_fetcher(settings, url) as fetcher:
            log(f"🔍 Автоматическое определение провайдера для URL: {url}", indent=1)
            provider = get_provider(url, fetcher, logger)
            kind = job.get("kind") or _infer_kind(provider, url)
            log(f"📚 Тип каталога: {kind}", indent=1)
            result = _run_job(provider, kind, job)
    except ValueError as e:
        log(f"❌ Ошибка при получении каталога: {e}", indent=1)
        return False
    except PlaywrightError as e:
        log(f"❌ Ошибка браузера: {e}", indent=1)
        return False

    if result is None:
        log("❌ Не удалось получить данные каталога.", indent=1)
        return False

    try:
        path = _write_catalog(result, settings["output_directory"], job.get("name") or url)
    except OSError as e:
        log(f"❌ Не удалось сохранить каталог: {e}", indent=1)
        return False
    log(f"💾 Каталог сохранён: {path}", indent=1)
    return True
