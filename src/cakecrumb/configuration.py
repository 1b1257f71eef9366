# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "cakecrumb"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)


class Configuration(TypedDict):
    data_path: Optional[str]
    starting_coins: int
    starting_berries: int
    timer_min_minutes: int
    timer_max_minutes: int
    multi_level_up: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "starting_coins": 100,
        "starting_berries": 50,
        "timer_min_minutes": 1,
        "timer_max_minutes": 120,
        "multi_level_up": False,
        "log_level": "WARNING",
    }


def resolve_data_path(config: Configuration) -> Path:
    """
    Directory holding one JSON file per persisted key. The configured
    data_path wins over the platform default.
    """
    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        return Path(data_path_setting).expanduser()
    return DEFAULT_DATA_PATH
