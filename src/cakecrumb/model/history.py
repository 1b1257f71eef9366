# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict, get_args

from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.task import Task

HistoryPeriod = Literal["today", "week", "month", "all"]

HISTORY_PERIODS: tuple[str, ...] = get_args(HistoryPeriod)


class TaskHistory(TypedDict):
    period: HistoryPeriod
    # Filtered by period and category, oldest first
    eaten: list[Task]
    rotten: list[Task]
    eaten_by_category: dict[EntityId, int]
    rotten_by_category: dict[EntityId, int]
    # All time, unfiltered
    total_eaten: int
    total_rotten: int
    completion_rate: int  # percent
