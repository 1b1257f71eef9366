# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from cakecrumb import configuration

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self, path: Path = configuration.APP_CONFIG_PATH) -> None:
        self._path = path
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()
        raw: Any = None
        if self._path.is_file():
            try:
                raw = load(self._path.read_text(), Loader=Loader)
            except YAMLError:
                logger.warning("Unreadable config at %s, using defaults", self._path)

        if not isinstance(raw, dict):
            self._config = defaults
            return

        # Fill in keys added since the file was written
        for key, value in defaults.items():
            if key not in raw:
                raw[key] = value
        self._config = cast(configuration.Configuration, raw)

    def __save_data(self, config: configuration.Configuration) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def ensure_config_file(self) -> None:
        if not self._path.is_file():
            self.__save_data(configuration.get_default_configuration())

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        starting_coins: Optional[int] = None,
        starting_berries: Optional[int] = None,
        timer_min_minutes: Optional[int] = None,
        timer_max_minutes: Optional[int] = None,
        multi_level_up: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if starting_coins is not None:
            self.config["starting_coins"] = starting_coins
        if starting_berries is not None:
            self.config["starting_berries"] = starting_berries
        if timer_min_minutes is not None:
            self.config["timer_min_minutes"] = timer_min_minutes
        if timer_max_minutes is not None:
            self.config["timer_max_minutes"] = timer_max_minutes
        if multi_level_up is not None:
            self.config["multi_level_up"] = multi_level_up
        if log_level is not None:
            self.config["log_level"] = log_level
