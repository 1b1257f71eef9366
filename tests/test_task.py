# SPDX-License-Identifier: MIT

"""Tests for the task lifecycle: add, complete, delete."""

import pytest

from cakecrumb.errors import ValidationError
from cakecrumb.model.achievement import AchievementId
from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.model.task import Task
from cakecrumb.service.task import (
    TASK_CREATION_EXPERIENCE,
    TASK_REWARDS,
    add_task,
    complete_task,
    delete_task,
)
from tests.helpers import FIXED_NOW

LATER = FIXED_NOW.add(hours=2)


def new_task(state: GameState, difficulty: str = "medium") -> Task:
    return add_task(state, "write report", "default", difficulty, FIXED_NOW)


def mark_first_task_unlocked(state: GameState) -> None:
    first_task = state.find_achievement(AchievementId.FIRST_TASK)
    assert first_task is not None
    first_task["is_unlocked"] = True


# =============================================================================
# Test: add_task
# =============================================================================


class TestAddTask:
    def test_creates_active_task(self, state: GameState) -> None:
        task = new_task(state)

        assert task["title"] == "write report"
        assert task["category_id"] == "default"
        assert task["difficulty"] == "medium"
        assert not task["completed"]
        assert not task["deleted"]
        assert task["created_at"] == FIXED_NOW
        assert task["completed_at"] is None
        assert state.tasks == [task]
        assert StateKey.TASKS in state.dirty_keys

    def test_grants_creation_experience(self, state: GameState) -> None:
        new_task(state)

        assert state.user_stats["experience"] == TASK_CREATION_EXPERIENCE
        assert state.coins == 100

    def test_title_is_trimmed(self, state: GameState) -> None:
        task = add_task(state, "  bake bread \n", "default", "easy", FIXED_NOW)

        assert task["title"] == "bake bread"

    def test_ids_are_unique(self, state: GameState) -> None:
        ids = {new_task(state)["id"] for _ in range(50)}

        assert len(ids) == 50

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_rejected(self, state: GameState, title: str) -> None:
        with pytest.raises(ValidationError) as error:
            add_task(state, title, "default", "easy", FIXED_NOW)

        assert error.value.field == "title"
        assert state.tasks == []
        assert state.user_stats["experience"] == 0

    def test_unknown_difficulty_rejected(self, state: GameState) -> None:
        with pytest.raises(ValidationError):
            add_task(state, "write report", "default", "legendary", FIXED_NOW)

    @pytest.mark.parametrize("category_id", ["strawberry", "no-such-flavor"])
    def test_flavor_must_be_owned(self, state: GameState, category_id: str) -> None:
        with pytest.raises(ValidationError) as error:
            add_task(state, "write report", category_id, "easy", FIXED_NOW)

        assert error.value.field == "category_id"
        assert state.tasks == []

    def test_purchased_flavor_accepted(self, state: GameState) -> None:
        strawberry = state.find_category("strawberry")
        assert strawberry is not None
        strawberry["owned"] = True

        task = add_task(state, "write report", "strawberry", "easy", FIXED_NOW)

        assert task["category_id"] == "strawberry"


# =============================================================================
# Test: complete_task
# =============================================================================


class TestCompleteTask:
    @pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
    def test_grants_difficulty_reward(self, state: GameState, difficulty: str) -> None:
        mark_first_task_unlocked(state)
        task = new_task(state, difficulty)
        coins = state.coins
        experience = state.user_stats["experience"]

        complete_task(state, task["id"], LATER)

        assert state.coins - coins == TASK_REWARDS[difficulty]["coins"]  # type: ignore[index]
        assert (
            state.user_stats["experience"] - experience
            == TASK_REWARDS[difficulty]["experience"]  # type: ignore[index]
        )

    def test_reward_tiers_are_ordered(self) -> None:
        easy, medium, hard = (TASK_REWARDS[d] for d in ("easy", "medium", "hard"))

        assert easy["coins"] < medium["coins"] < hard["coins"]
        assert easy["experience"] < medium["experience"] < hard["experience"]

    def test_marks_completed_and_signals_eat(self, state: GameState) -> None:
        task = new_task(state)

        completed = complete_task(state, task["id"], LATER)

        assert completed is not None
        assert completed["completed"]
        assert completed["completed_at"] == LATER
        assert not completed["deleted"]
        assert state.animation == {"type": "eat", "task_id": task["id"]}

    def test_first_completion_unlocks_first_task(self, state: GameState) -> None:
        task = new_task(state)

        complete_task(state, task["id"], LATER)

        first_task = state.find_achievement(AchievementId.FIRST_TASK)
        tasks_5 = state.find_achievement(AchievementId.TASKS_5)
        assert first_task is not None and first_task["is_unlocked"]
        assert tasks_5 is not None and tasks_5["progress"] == 1

    def test_completion_counts_feed_cumulative_achievements(
        self, state: GameState
    ) -> None:
        for _ in range(5):
            complete_task(state, new_task(state, "easy")["id"], LATER)

        tasks_5 = state.find_achievement(AchievementId.TASKS_5)
        tasks_10 = state.find_achievement(AchievementId.TASKS_10)
        assert tasks_5 is not None and tasks_5["is_unlocked"]
        assert tasks_10 is not None and tasks_10["progress"] == 5
        assert not tasks_10["is_unlocked"]

    def test_completing_twice_is_a_no_op(self, state: GameState) -> None:
        task = new_task(state)
        complete_task(state, task["id"], LATER)
        coins = state.coins

        assert complete_task(state, task["id"], LATER.add(days=1)) is None

        assert state.coins == coins
        found = state.find_task(task["id"])
        assert found is not None
        assert found["completed_at"] == LATER

    def test_completing_deleted_task_is_a_no_op(self, state: GameState) -> None:
        task = new_task(state)
        delete_task(state, task["id"], LATER)

        assert complete_task(state, task["id"], LATER) is None

        found = state.find_task(task["id"])
        assert found is not None
        assert not found["completed"]
        assert found["deleted"]
        assert state.animation["type"] == "rot"

    def test_unknown_id_is_a_no_op(self, state: GameState) -> None:
        assert complete_task(state, "missing", LATER) is None
        assert state.animation == {"type": None, "task_id": None}


# =============================================================================
# Test: delete_task
# =============================================================================


class TestDeleteTask:
    def test_marks_deleted_and_signals_rot(self, state: GameState) -> None:
        task = new_task(state)
        coins = state.coins
        experience = state.user_stats["experience"]

        deleted = delete_task(state, task["id"], LATER)

        assert deleted is not None
        assert deleted["deleted"]
        assert deleted["deleted_at"] == LATER
        assert not deleted["completed"]
        assert state.animation == {"type": "rot", "task_id": task["id"]}
        assert state.coins == coins
        assert state.user_stats["experience"] == experience

    def test_deleting_completed_task_is_a_no_op(self, state: GameState) -> None:
        task = new_task(state)
        complete_task(state, task["id"], LATER)

        assert delete_task(state, task["id"], LATER) is None

        found = state.find_task(task["id"])
        assert found is not None
        assert found["completed"]
        assert not found["deleted"]
        assert found["deleted_at"] is None

    def test_terminal_task_keeps_its_fields(self, state: GameState) -> None:
        task = new_task(state, "hard")
        delete_task(state, task["id"], LATER)
        before = dict(state.find_task(task["id"]) or {})

        delete_task(state, task["id"], LATER.add(days=1))
        complete_task(state, task["id"], LATER.add(days=1))

        assert state.find_task(task["id"]) == before

    def test_new_signal_overwrites_previous(self, state: GameState) -> None:
        eaten = new_task(state)
        rotten = new_task(state)

        complete_task(state, eaten["id"], LATER)
        delete_task(state, rotten["id"], LATER)

        assert state.animation == {"type": "rot", "task_id": rotten["id"]}
