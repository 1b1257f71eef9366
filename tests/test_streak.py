# SPDX-License-Identifier: MIT

"""Tests for the daily streak evaluated at engine start."""

import json

from cakecrumb.engine import ProgressionEngine
from cakecrumb.model.achievement import AchievementId
from cakecrumb.model.game_state import GameState
from cakecrumb.repository.store import MemoryStore
from cakecrumb.service.achievement import ACHIEVEMENT_EXPERIENCE_BONUS
from cakecrumb.service.streak import check_and_update_streak
from tests.helpers import TODAY, FakeClock


def is_unlocked(state: GameState, id: str) -> bool:
    found = state.find_achievement(id)
    assert found is not None
    return found["is_unlocked"]


# =============================================================================
# Test: check_and_update_streak
# =============================================================================


class TestCheckAndUpdateStreak:
    def test_first_run_starts_streak(self, state: GameState) -> None:
        check_and_update_streak(state, TODAY)

        assert state.user_stats["streak"] == 1
        assert state.user_stats["last_active_date"] == TODAY
        assert state.coins == 100

    def test_same_day_is_a_no_op(self, state: GameState) -> None:
        state.user_stats["streak"] = 4
        state.user_stats["last_active_date"] = TODAY

        check_and_update_streak(state, TODAY)

        assert state.user_stats["streak"] == 4
        assert state.dirty_keys == set()

    def test_consecutive_day_extends_streak(self, state: GameState) -> None:
        state.user_stats["streak"] = 1
        state.user_stats["last_active_date"] = TODAY.subtract(days=1)

        check_and_update_streak(state, TODAY)

        assert state.user_stats["streak"] == 2
        assert state.user_stats["last_active_date"] == TODAY
        assert state.coins == 100 + 2 * 5

    def test_third_day_unlocks_streak_3(self, state: GameState) -> None:
        state.user_stats["streak"] = 2
        state.user_stats["last_active_date"] = TODAY.subtract(days=1)

        check_and_update_streak(state, TODAY)

        assert state.user_stats["streak"] == 3
        assert is_unlocked(state, AchievementId.STREAK_3)
        assert not is_unlocked(state, AchievementId.STREAK_7)
        assert state.coins == 100 + 3 * 5
        assert state.user_stats["experience"] == ACHIEVEMENT_EXPERIENCE_BONUS

    def test_seventh_day_unlocks_streak_7(self, state: GameState) -> None:
        streak_3 = state.find_achievement(AchievementId.STREAK_3)
        assert streak_3 is not None
        streak_3["is_unlocked"] = True
        streak_3["progress"] = 3
        state.user_stats["streak"] = 6
        state.user_stats["last_active_date"] = TODAY.subtract(days=1)

        check_and_update_streak(state, TODAY)

        assert state.user_stats["streak"] == 7
        assert is_unlocked(state, AchievementId.STREAK_7)
        assert state.coins == 100 + 7 * 5

    def test_streak_progress_tracks_current_streak(self, state: GameState) -> None:
        state.user_stats["streak"] = 4
        state.user_stats["last_active_date"] = TODAY.subtract(days=1)

        check_and_update_streak(state, TODAY)

        streak_7 = state.find_achievement(AchievementId.STREAK_7)
        assert streak_7 is not None
        assert streak_7["progress"] == 5

    def test_gap_resets_streak(self, state: GameState) -> None:
        state.user_stats["streak"] = 4
        state.user_stats["last_active_date"] = TODAY.subtract(days=5)

        check_and_update_streak(state, TODAY)

        assert state.user_stats["streak"] == 1
        assert state.user_stats["last_active_date"] == TODAY
        assert state.coins == 100

    def test_clock_going_backwards_is_a_no_op(self, state: GameState) -> None:
        state.user_stats["streak"] = 2
        state.user_stats["last_active_date"] = TODAY.add(days=1)

        check_and_update_streak(state, TODAY)

        assert state.user_stats["streak"] == 2
        assert state.user_stats["last_active_date"] == TODAY.add(days=1)


# =============================================================================
# Test: streak on engine start
# =============================================================================


class TestStreakOnEngineStart:
    def test_fresh_engine_starts_streak(self, engine: ProgressionEngine) -> None:
        assert engine.user_stats["streak"] == 1
        assert engine.user_stats["last_active_date"] == TODAY

    def test_restart_next_day_extends_streak(
        self, store: MemoryStore, clock: FakeClock
    ) -> None:
        ProgressionEngine(store, clock=clock)
        clock.advance(days=1)

        engine = ProgressionEngine(store, clock=clock)

        assert engine.user_stats["streak"] == 2
        saved = json.loads(store.data["user_stats"])
        assert saved["streak"] == 2
        assert saved["last_active_date"] == TODAY.add(days=1).format("YYYY-MM-DD")

    def test_restart_same_day_keeps_streak(
        self, store: MemoryStore, clock: FakeClock
    ) -> None:
        ProgressionEngine(store, clock=clock)
        clock.advance(hours=3)

        engine = ProgressionEngine(store, clock=clock)

        assert engine.user_stats["streak"] == 1
        assert engine.coins == 100
