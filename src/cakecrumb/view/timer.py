# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from cakecrumb.model.task import Task
from cakecrumb.model.timer_session import TimerSession
from cakecrumb.time import datetime_to_display_local_datetime_str_optional
from cakecrumb.view.util import short_id


def timers_view(sessions: list[TimerSession], tasks: list[Task]) -> None:
    titles = {task["id"]: task["title"] for task in tasks}

    timers_table = Table(box=box.SIMPLE)
    timers_table.add_column("id")
    timers_table.add_column("task")
    timers_table.add_column("minutes", justify="right")
    timers_table.add_column("started")
    timers_table.add_column("completed")

    for session in sessions:
        timers_table.add_row(
            short_id(session["id"]),
            titles.get(session["task_id"], "[dim]unknown[/dim]"),
            str(session["duration_minutes"]),
            datetime_to_display_local_datetime_str_optional(session["started_at"])
            or "",
            datetime_to_display_local_datetime_str_optional(session["completed_at"])
            or "[yellow]running[/yellow]",
        )

    console = Console()
    console.print(timers_table)
