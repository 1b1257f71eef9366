# SPDX-License-Identifier: MIT

import pendulum

from cakecrumb.model.entity_id import EntityId, generate_entity_id
from cakecrumb.model.timer_session import TimerSession


def get_timer_session_template(
    task_id: EntityId, duration_minutes: int, now: pendulum.DateTime
) -> TimerSession:
    return {
        "id": generate_entity_id(),
        "task_id": task_id,
        "duration_minutes": duration_minutes,
        "started_at": now,
        "completed_at": None,
    }
