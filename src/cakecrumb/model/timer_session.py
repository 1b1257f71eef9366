# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from cakecrumb.model.entity_id import EntityId


class TimerSession(TypedDict):
    id: EntityId
    task_id: EntityId
    duration_minutes: int
    started_at: pendulum.DateTime
    completed_at: Optional[pendulum.DateTime]
