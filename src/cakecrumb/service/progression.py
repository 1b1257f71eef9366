# SPDX-License-Identifier: MIT

import logging
import math

from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.service import economy
from cakecrumb.service.validate import require_amount

logger = logging.getLogger(__name__)

LEVEL_UP_COINS_PER_LEVEL = 50
LEVEL_UP_BERRIES_PER_LEVEL = 10


def experience_threshold(level: int) -> int:
    """Experience needed to leave ``level``."""
    return math.floor(100 * 1.2**level)


def gain_experience(state: GameState, amount: int, multi_level_up: bool = False) -> int:
    """
    Add experience and apply level-ups, returning how many levels were
    gained.

    Without ``multi_level_up`` at most one level is gained per call, even if
    the remainder still reaches the next threshold. The surplus then stays in
    ``experience`` until the next gain.
    """
    require_amount(amount)

    stats = state.user_stats
    stats["experience"] += amount
    state.mark_dirty(StateKey.USER_STATS)

    levels_gained = 0
    while stats["experience"] >= stats["experience_to_next_level"]:
        stats["experience"] -= stats["experience_to_next_level"]
        stats["level"] += 1
        stats["experience_to_next_level"] = experience_threshold(stats["level"])
        levels_gained += 1

        new_level = stats["level"]
        logger.info("Reached level %d", new_level)
        economy.add_coins(state, LEVEL_UP_COINS_PER_LEVEL * new_level)
        economy.add_berries(state, LEVEL_UP_BERRIES_PER_LEVEL * new_level)

        if not multi_level_up:
            break

    return levels_gained
