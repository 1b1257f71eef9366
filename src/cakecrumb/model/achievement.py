# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from cakecrumb.model.entity_id import EntityId


class AchievementId:
    FIRST_TASK = "first-task"
    FIRST_TIMER = "first-timer"
    TASKS_5 = "tasks-5"
    TASKS_10 = "tasks-10"
    STREAK_3 = "streak-3"
    STREAK_7 = "streak-7"
    COLLECTOR = "collector"


class Achievement(TypedDict):
    id: EntityId
    title: str
    description: str
    icon: str
    is_unlocked: bool
    # Both None for binary achievements
    progress: Optional[int]
    goal: Optional[int]


def is_cumulative(achievement: Achievement) -> bool:
    return achievement["progress"] is not None and achievement["goal"] is not None
