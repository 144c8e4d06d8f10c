import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import Error as PlaywrightError

from src.app import _catalog_filename, _infer_kind, run_export
from src.providers.types import EpisodeRecord, SeasonRecord, SerieRecord
from src.providers.wecima import WeCimaProvider
from tests.pages import BASE_URL, episode_url

SERIE_URL = f"{BASE_URL}/series/show/"


def make_config(tmp_path, jobs: list[dict[str, Any]]) -> dict[str, Any]:
    return {"settings": {"display_info": False, "output_directory": str(tmp_path)}, "catalog": jobs}


def test_run_export_no_config():
    """
    Tests that run_export counts a missing config file as a failure.
    """
    with patch("src.app.load_config", return_value=None):
        assert run_export() == 1


def test_run_export_no_jobs():
    """
    Tests that run_export succeeds without doing anything when no catalog jobs are configured.
    """
    config: dict[str, Any] = {"settings": {}, "catalog": []}
    with patch("src.app.load_config", return_value=config):
        assert run_export() == 0


def test_run_export_writes_serie_catalog(tmp_path):
    """
    Tests that a serie job is walked and saved as JSON named after the job.
    """
    serie = SerieRecord(
        title="Show",
        link=SERIE_URL,
        seasons=(SeasonRecord(title="Season 1", link=f"{BASE_URL}/series/show-s1/"), None),
    )
    provider = MagicMock()
    provider.get_serie_by_previews.return_value = serie
    config = make_config(tmp_path, [{"name": "My Show", "url": SERIE_URL, "kind": "serie"}])

    with patch("src.app.load_config", return_value=config), patch("src.app.get_provider", return_value=provider):
        assert run_export() == 0

    provider.get_serie_by_previews.assert_called_once_with(SERIE_URL)
    with open(tmp_path / "My_Show.json", encoding="utf-8") as f:
        data = json.load(f)
    assert data["title"] == "Show"
    assert data["seasons"][1] is None


def test_run_export_season_job_passes_range(tmp_path):
    """
    Tests that start and end links of a season job reach the season walk.
    """
    season_url = f"{BASE_URL}/series/show-s1/"
    provider = MagicMock()
    provider.get_season_by_previews.return_value = SeasonRecord(title="Season 1", link=season_url)
    job = {"name": "s1", "url": season_url, "kind": "season", "start": episode_url(4), "end": episode_url(2)}

    with patch("src.app.load_config", return_value=make_config(tmp_path, [job])), patch(
        "src.app.get_provider", return_value=provider
    ):
        assert run_export() == 0

    provider.get_season_by_previews.assert_called_once_with(season_url, episode_url(4), episode_url(2))


def test_run_export_counts_failed_jobs(tmp_path):
    """
    Tests that jobs without a result, without a provider or with an unknown kind are counted as failures.
    """
    provider = MagicMock()
    provider.get_serie_by_previews.return_value = None
    jobs = [
        {"name": "empty", "url": SERIE_URL, "kind": "serie"},
        {"name": "bad kind", "url": SERIE_URL, "kind": "movie"},
        {"name": "no url"},
    ]

    with patch("src.app.load_config", return_value=make_config(tmp_path, jobs)), patch(
        "src.app.get_provider", return_value=provider
    ):
        assert run_export() == 3

    assert list(tmp_path.iterdir()) == []


def test_run_export_unknown_site(tmp_path):
    """
    Tests that a URL no provider handles fails the job instead of the whole run.
    """
    jobs = [{"name": "elsewhere", "url": "https://example.com/series/x/"}]
    with patch("src.app.load_config", return_value=make_config(tmp_path, jobs)):
        assert run_export() == 1


def test_run_export_episode_job(tmp_path):
    """
    Tests that an episode URL without a declared kind is exported as a single episode.
    """
    episode = EpisodeRecord(title="E1", link=episode_url(1))
    provider = MagicMock()
    provider.is_episode_url.return_value = True
    provider.get_episode.return_value = episode

    with patch("src.app.load_config", return_value=make_config(tmp_path, [{"name": "e1", "url": episode_url(1)}])), patch(
        "src.app.get_provider", return_value=provider
    ):
        assert run_export() == 0

    provider.get_episode.assert_called_once_with(episode_url(1))


def test_run_export_output_directory_not_writable(tmp_path):
    """
    Tests that a catalog that cannot be saved fails its job without stopping the run.
    """
    output = tmp_path / "out"
    output.write_text("not a directory", encoding="utf-8")
    provider = MagicMock()
    provider.is_episode_url.return_value = True
    provider.get_episode.return_value = EpisodeRecord(title="E1", link=episode_url(1))
    config = {
        "settings": {"display_info": False, "output_directory": str(output)},
        "catalog": [{"name": "e1", "url": episode_url(1)}, {"name": "e2", "url": episode_url(2)}],
    }

    with patch("src.app.load_config", return_value=config), patch("src.app.get_provider", return_value=provider):
        assert run_export() == 2

    assert provider.get_episode.call_count == 2


def test_run_export_browser_launch_failure(tmp_path):
    """
    Tests that a browser that cannot be started fails the job instead of crashing the run.
    """
    config = make_config(tmp_path, [{"name": "e1", "url": episode_url(1)}])
    config["settings"]["fetcher"] = "browser"

    with patch("src.app.load_config", return_value=config), patch(
        "src.app.open_browser_page", side_effect=PlaywrightError("Executable doesn't exist")
    ):
        assert run_export() == 1


def test_infer_kind():
    provider = WeCimaProvider(MagicMock())
    assert _infer_kind(provider, episode_url(1)) == "episode"
    assert _infer_kind(provider, SERIE_URL) == "serie"


def test_infer_kind_unknown_url():
    provider = WeCimaProvider(MagicMock())
    with pytest.raises(ValueError, match="Unknown catalog kind"):
        _infer_kind(provider, f"{BASE_URL}/movies/film/")


def test_run_export_unknown_url_kind(tmp_path):
    """
    Tests that a URL of a supported site that is neither a serie nor an episode fails the job.
    """
    jobs = [{"name": "film", "url": f"{BASE_URL}/movies/film/"}]
    with patch("src.app.load_config", return_value=make_config(tmp_path, jobs)):
        assert run_export() == 1

    assert list(tmp_path.iterdir()) == []


def test_catalog_filename():
    assert _catalog_filename("Kurulus: Osman / S1") == "Kurulus_Osman_S1.json"
    assert _catalog_filename("المؤسس عثمان") == "المؤسس_عثمان.json"
    assert _catalog_filename("???") == "catalog.json"
