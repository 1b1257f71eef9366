# SPDX-License-Identifier: MIT

from typing import Optional

from cakecrumb import configuration
from cakecrumb.engine import ProgressionEngine
from cakecrumb.log_config import configure_logging
from cakecrumb.repository.configuration import ConfigurationRepository
from cakecrumb.repository.store import FileStore


def initialize(
    config_repository: Optional[ConfigurationRepository] = None,
) -> ProgressionEngine:
    """
    Build the engine for this process: ensure the config file and data
    directory exist, set up logging, load or seed all state.
    """
    if config_repository is None:
        config_repository = ConfigurationRepository()
    config_repository.ensure_config_file()
    config = config_repository.get_config()

    configure_logging(config["log_level"])

    data_path = configuration.resolve_data_path(config)
    data_path.mkdir(parents=True, exist_ok=True)

    return ProgressionEngine(FileStore(data_path), config)
