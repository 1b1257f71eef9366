# SPDX-License-Identifier: MIT

import logging

from cakecrumb.model.achievement import Achievement, is_cumulative
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.service import progression
from cakecrumb.service.validate import require_amount

logger = logging.getLogger(__name__)

ACHIEVEMENT_EXPERIENCE_BONUS = 50


def unlock_achievement(
    state: GameState, id: EntityId, multi_level_up: bool = False
) -> bool:
    """Unlock once. Returns True only for the call that unlocked it."""
    achievement = state.find_achievement(id)
    if achievement is None or achievement["is_unlocked"]:
        return False
    __unlock(state, achievement, multi_level_up)
    return True


def increment_achievement_progress(
    state: GameState, id: EntityId, amount: int, multi_level_up: bool = False
) -> bool:
    """
    Add ``amount`` to a cumulative achievement's progress, unlocking it in
    the same step once the goal is reached. Binary, unknown and already
    unlocked achievements are left alone.

    Returns True if this call unlocked the achievement.
    """
    require_amount(amount)

    achievement = state.find_achievement(id)
    if (
        achievement is None
        or achievement["is_unlocked"]
        or not is_cumulative(achievement)
    ):
        return False

    progress = achievement["progress"] or 0
    goal = achievement["goal"] or 0
    achievement["progress"] = progress + amount
    state.mark_dirty(StateKey.ACHIEVEMENTS)

    if progress + amount >= goal:
        __unlock(state, achievement, multi_level_up)
        return True
    return False


def sync_achievement_progress(
    state: GameState, id: EntityId, value: int, multi_level_up: bool = False
) -> bool:
    """Raise progress to a measured ``value``. Progress never goes down."""
    achievement = state.find_achievement(id)
    if achievement is None or not is_cumulative(achievement):
        return False
    delta = value - (achievement["progress"] or 0)
    if delta <= 0:
        return False
    return increment_achievement_progress(state, id, delta, multi_level_up)


def __unlock(state: GameState, achievement: Achievement, multi_level_up: bool) -> None:
    achievement["is_unlocked"] = True
    if achievement["goal"] is not None:
        achievement["progress"] = achievement["goal"]
    state.mark_dirty(StateKey.ACHIEVEMENTS)
    logger.info("Unlocked achievement %r", achievement["id"])

    progression.gain_experience(state, ACHIEVEMENT_EXPERIENCE_BONUS, multi_level_up)
