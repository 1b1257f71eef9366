# SPDX-License-Identifier: MIT

import pytest

from cakecrumb.configuration import Configuration, get_default_configuration
from cakecrumb.engine import ProgressionEngine
from cakecrumb.model.game_state import GameState
from cakecrumb.repository.store import MemoryStore
from tests.helpers import FIXED_NOW, FakeClock, make_state


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(FIXED_NOW)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def config() -> Configuration:
    return get_default_configuration()


@pytest.fixture
def engine(
    store: MemoryStore, config: Configuration, clock: FakeClock
) -> ProgressionEngine:
    return ProgressionEngine(store, config, clock)


@pytest.fixture
def state() -> GameState:
    return make_state()
