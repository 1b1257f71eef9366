# SPDX-License-Identifier: MIT

import math
from typing import Optional, cast

import pendulum

from cakecrumb.errors import ValidationError
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.game_state import GameState
from cakecrumb.model.history import HISTORY_PERIODS, HistoryPeriod, TaskHistory
from cakecrumb.model.task import Task


def period_start(
    period: HistoryPeriod, now: pendulum.DateTime
) -> Optional[pendulum.DateTime]:
    """
    Local start of the period containing ``now``. Weeks start on Sunday.
    Returns None for ``all``.
    """
    local_now = now.in_tz("local")
    if period == "today":
        return local_now.start_of("day")
    if period == "week":
        # isoweekday: Monday 1 .. Sunday 7
        days_since_sunday = local_now.isoweekday() % 7
        return local_now.start_of("day").subtract(days=days_since_sunday)
    if period == "month":
        return local_now.start_of("month")
    return None


def finished_at(task: Task) -> pendulum.DateTime:
    """When the task was eaten or thrown out, falling back to creation."""
    if task["completed"] and task["completed_at"] is not None:
        return task["completed_at"]
    if task["deleted"] and task["deleted_at"] is not None:
        return task["deleted_at"]
    return task["created_at"]


def completion_rate(eaten: int, rotten: int) -> int:
    """Eaten share of all finished tasks in whole percent, halves round up."""
    total = eaten + rotten
    if total == 0:
        return 0
    return math.floor(eaten * 100 / total + 0.5)


def task_history(
    state: GameState,
    now: pendulum.DateTime,
    period: str = "all",
    category_id: Optional[EntityId] = None,
) -> TaskHistory:
    if period not in HISTORY_PERIODS:
        choices = ", ".join(HISTORY_PERIODS)
        raise ValidationError("period", f"must be one of {choices}, got {period!r}")
    history_period = cast(HistoryPeriod, period)
    start = period_start(history_period, now)

    def in_view(task: Task) -> bool:
        if category_id is not None and task["category_id"] != category_id:
            return False
        return start is None or finished_at(task) >= start

    all_eaten = [t for t in state.tasks if t["completed"]]
    all_rotten = [t for t in state.tasks if t["deleted"]]
    eaten = sorted(filter(in_view, all_eaten), key=finished_at)
    rotten = sorted(filter(in_view, all_rotten), key=finished_at)

    return {
        "period": history_period,
        "eaten": eaten,
        "rotten": rotten,
        "eaten_by_category": __count_by_category(eaten),
        "rotten_by_category": __count_by_category(rotten),
        "total_eaten": len(all_eaten),
        "total_rotten": len(all_rotten),
        "completion_rate": completion_rate(len(all_eaten), len(all_rotten)),
    }


def __count_by_category(tasks: list[Task]) -> dict[EntityId, int]:
    counts: dict[EntityId, int] = {}
    for task in tasks:
        counts[task["category_id"]] = counts.get(task["category_id"], 0) + 1
    return counts
