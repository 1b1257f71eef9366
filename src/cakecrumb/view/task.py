# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from cakecrumb.color import EATEN_TASK_COLOR, ROTTEN_TASK_COLOR
from cakecrumb.model.category import Category
from cakecrumb.model.task import Task
from cakecrumb.time import datetime_to_display_local_datetime_str_optional
from cakecrumb.view.util import category_label, colored, short_id


def task_status(task: Task) -> str:
    if task["completed"]:
        return "eaten"
    if task["deleted"]:
        return "rotten"
    return "fresh"


def tasks_view(
    tasks: list[Task],
    categories: list[Category],
    columns: list[str] = ["id", "title", "flavor", "difficulty", "status", "created"],
) -> None:
    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = short_id(task["id"])
            elif column == "title":
                column_value = task["title"]
            elif column == "flavor":
                column_value = category_label(task["category_id"], categories)
            elif column == "difficulty":
                column_value = task["difficulty"]
            elif column == "status":
                column_value = task_status(task)
            elif column == "created":
                column_value = (
                    datetime_to_display_local_datetime_str_optional(task["created_at"])
                    or ""
                )

            # Flavor keeps its own color
            if column != "flavor":
                if task["completed"]:
                    column_value = colored(column_value, EATEN_TASK_COLOR)
                elif task["deleted"]:
                    column_value = colored(column_value, ROTTEN_TASK_COLOR)

            row.append(column_value)
        tasks_table.add_row(*row)

    console = Console()
    console.print(tasks_table)


def single_task_view(task: Task, categories: list[Category]) -> None:
    task_table = Table(box=box.SIMPLE, show_header=False)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", task["id"])
    task_table.add_row("title", task["title"])
    task_table.add_row("flavor", category_label(task["category_id"], categories))
    task_table.add_row("difficulty", task["difficulty"])
    task_table.add_row("status", task_status(task))
    task_table.add_row(
        "created",
        datetime_to_display_local_datetime_str_optional(task["created_at"]) or "",
    )
    if task["completed_at"] is not None:
        task_table.add_row(
            "completed",
            datetime_to_display_local_datetime_str_optional(task["completed_at"])
            or "",
        )
    if task["deleted_at"] is not None:
        task_table.add_row(
            "deleted",
            datetime_to_display_local_datetime_str_optional(task["deleted_at"]) or "",
        )

    console = Console()
    console.print(task_table)
