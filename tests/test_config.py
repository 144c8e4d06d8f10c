from src.config import DEFAULT_SETTINGS, get_settings, load_config
from src.constants import DEFAULT_FETCHER


def test_load_config_missing_file(tmp_path):
    assert load_config(str(tmp_path / "config.yaml")) is None


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "settings:\n  fetcher: browser\ncatalog:\n  - name: Show\n    url: https://wecima.film/series/عثمان/\n",
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert config["settings"]["fetcher"] == "browser"
    assert config["catalog"][0]["url"] == "https://wecima.film/series/عثمان/"


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("settings: [unclosed\n", encoding="utf-8")
    assert load_config(str(path)) is None


def test_get_settings_fills_defaults():
    settings = get_settings({"settings": {"timeout": 5}})
    assert settings["timeout"] == 5
    assert settings["fetcher"] == DEFAULT_FETCHER
    assert settings["display_info"] is True


def test_get_settings_without_section():
    assert get_settings({"settings": None}) == DEFAULT_SETTINGS
