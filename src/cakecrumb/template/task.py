# SPDX-License-Identifier: MIT

import pendulum

from cakecrumb.model.entity_id import EntityId, generate_entity_id
from cakecrumb.model.task import Difficulty, Task


def get_task_template(
    title: str, category_id: EntityId, difficulty: Difficulty, now: pendulum.DateTime
) -> Task:
    return {
        "id": generate_entity_id(),
        "title": title,
        "category_id": category_id,
        "difficulty": difficulty,
        "completed": False,
        "deleted": False,
        "created_at": now,
        "completed_at": None,
        "deleted_at": None,
    }
