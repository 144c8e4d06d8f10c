from typing import Any

import yaml

from src.constants import DEFAULT_CONFIG_PATH, DEFAULT_FETCHER, DEFAULT_OUTPUT_DIRECTORY, DEFAULT_TIMEOUT
from src.utils import log

DEFAULT_SETTINGS: dict[str, Any] = {
    "display_info": True,
    "fetcher": DEFAULT_FETCHER,
    "timeout": DEFAULT_TIMEOUT,
    "output_directory": DEFAULT_OUTPUT_DIRECTORY,
    "cookies": {"enable": False},
}


def load_config(path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any] | None:
    """Loads the configuration from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        return None
    except yaml.YAMLError as e:
        log(f"❌ Ошибка при разборе {path}: {e}")
        return None


def get_settings(config_data: dict[str, Any]) -> dict[str, Any]:
    """Returns the "settings" section with defaults filled in for missing keys."""
    return {**DEFAULT_SETTINGS, **(config_data.get("settings") or {})}
