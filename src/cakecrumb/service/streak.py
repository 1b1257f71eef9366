# SPDX-License-Identifier: MIT

import logging

import pendulum

from cakecrumb.model.achievement import AchievementId
from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.service import achievement, economy

logger = logging.getLogger(__name__)

STREAK_COINS_PER_DAY = 5

STREAK_ACHIEVEMENTS: dict[int, str] = {
    3: AchievementId.STREAK_3,
    7: AchievementId.STREAK_7,
}


def check_and_update_streak(
    state: GameState, today: pendulum.Date, multi_level_up: bool = False
) -> None:
    stats = state.user_stats
    last_active_date = stats["last_active_date"]

    if last_active_date is None:
        stats["streak"] = 1
        stats["last_active_date"] = today
        state.mark_dirty(StateKey.USER_STATS)
        return

    day_diff = last_active_date.diff(today, False).in_days()
    if day_diff <= 0:
        # Same day, or the clock moved backwards
        return

    if day_diff > 1:
        logger.info("Streak of %d broken after %d days", stats["streak"], day_diff)
        stats["streak"] = 1
        stats["last_active_date"] = today
        state.mark_dirty(StateKey.USER_STATS)
        return

    stats["streak"] += 1
    stats["last_active_date"] = today
    state.mark_dirty(StateKey.USER_STATS)
    streak = stats["streak"]

    for streak_achievement_id in STREAK_ACHIEVEMENTS.values():
        achievement.sync_achievement_progress(
            state, streak_achievement_id, streak, multi_level_up
        )
    if streak in STREAK_ACHIEVEMENTS:
        achievement.unlock_achievement(
            state, STREAK_ACHIEVEMENTS[streak], multi_level_up
        )

    economy.add_coins(state, streak * STREAK_COINS_PER_DAY)
