# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from cakecrumb.model.entity_id import EntityId

Difficulty = Literal["easy", "medium", "hard"]

DIFFICULTIES: tuple[str, ...] = get_args(Difficulty)


class Task(TypedDict):
    id: EntityId
    title: str
    category_id: EntityId
    difficulty: Difficulty
    completed: bool
    deleted: bool
    created_at: pendulum.DateTime
    completed_at: Optional[pendulum.DateTime]
    deleted_at: Optional[pendulum.DateTime]


def is_active(task: Task) -> bool:
    return not task["completed"] and not task["deleted"]
