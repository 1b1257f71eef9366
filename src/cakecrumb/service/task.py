# SPDX-License-Identifier: MIT

import logging
from typing import Optional, TypedDict, cast

import pendulum

from cakecrumb.errors import ValidationError
from cakecrumb.model.achievement import AchievementId
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.model.task import DIFFICULTIES, Difficulty, Task, is_active
from cakecrumb.service import achievement, economy, progression
from cakecrumb.template.task import get_task_template

logger = logging.getLogger(__name__)

TASK_CREATION_EXPERIENCE = 5


class TaskReward(TypedDict):
    coins: int
    experience: int


TASK_REWARDS: dict[Difficulty, TaskReward] = {
    "easy": {"coins": 20, "experience": 10},
    "medium": {"coins": 50, "experience": 25},
    "hard": {"coins": 100, "experience": 50},
}

COMPLETION_COUNT_ACHIEVEMENTS = (AchievementId.TASKS_5, AchievementId.TASKS_10)


def add_task(
    state: GameState,
    title: str,
    category_id: EntityId,
    difficulty: str,
    now: pendulum.DateTime,
    multi_level_up: bool = False,
) -> Task:
    title = title.strip()
    if title == "":
        raise ValidationError("title", "must not be empty")
    if difficulty not in DIFFICULTIES:
        choices = ", ".join(DIFFICULTIES)
        raise ValidationError(
            "difficulty", f"must be one of {choices}, got {difficulty!r}"
        )
    category = state.find_category(category_id)
    if category is None or not category["owned"]:
        raise ValidationError(
            "category_id", f"{category_id!r} is not a flavor you own"
        )

    task = get_task_template(title, category_id, cast(Difficulty, difficulty), now)
    state.tasks.append(task)
    state.mark_dirty(StateKey.TASKS)
    logger.debug("Added task %s", task["id"])

    progression.gain_experience(state, TASK_CREATION_EXPERIENCE, multi_level_up)
    return task


def complete_task(
    state: GameState,
    id: EntityId,
    now: pendulum.DateTime,
    multi_level_up: bool = False,
) -> Optional[Task]:
    task = state.find_task(id)
    if task is None or not is_active(task):
        return None

    task["completed"] = True
    task["completed_at"] = now
    state.mark_dirty(StateKey.TASKS)

    reward = TASK_REWARDS[task["difficulty"]]
    economy.add_coins(state, reward["coins"])
    progression.gain_experience(state, reward["experience"], multi_level_up)

    completed_count = sum(1 for t in state.tasks if t["completed"])
    achievement.unlock_achievement(state, AchievementId.FIRST_TASK, multi_level_up)
    for achievement_id in COMPLETION_COUNT_ACHIEVEMENTS:
        achievement.sync_achievement_progress(
            state, achievement_id, completed_count, multi_level_up
        )

    state.animation = {"type": "eat", "task_id": task["id"]}
    logger.debug("Completed task %s", task["id"])
    return task


def delete_task(state: GameState, id: EntityId, now: pendulum.DateTime) -> Optional[Task]:
    task = state.find_task(id)
    if task is None or not is_active(task):
        return None

    task["deleted"] = True
    task["deleted_at"] = now
    state.mark_dirty(StateKey.TASKS)

    state.animation = {"type": "rot", "task_id": task["id"]}
    logger.debug("Deleted task %s", task["id"])
    return task
