# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from cakecrumb.model.category import Category
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.history import TaskHistory
from cakecrumb.model.task import Task
from cakecrumb.service.history import finished_at
from cakecrumb.time import datetime_to_display_local_datetime_str
from cakecrumb.view.util import category_label

PERIOD_LABELS = {
    "today": "today",
    "week": "this week",
    "month": "this month",
    "all": "all time",
}


def fridge_view(history: TaskHistory, categories: list[Category]) -> None:
    console = Console()
    period_label = PERIOD_LABELS[history["period"]]

    for label, tasks, counts in (
        ("eaten", history["eaten"], history["eaten_by_category"]),
        ("rotten", history["rotten"], history["rotten_by_category"]),
    ):
        if not tasks:
            console.print(f"[dim]No {label} cakes {period_label}[/dim]")
            continue
        console.print(
            __by_flavor_table(f"{label} cakes {period_label}", counts, categories)
        )
        console.print(__details_table(tasks, categories))

    console.print(
        f"completion rate {history['completion_rate']}%  "
        f"[green]{history['total_eaten']} eaten[/green]  "
        f"[dark_olive_green3]{history['total_rotten']} rotten[/dark_olive_green3]"
        "  (all time)"
    )


def __by_flavor_table(
    title: str, counts: dict[EntityId, int], categories: list[Category]
) -> Table:
    table = Table(box=box.SIMPLE, title=title)
    table.add_column("flavor")
    table.add_column("cakes", justify="right")
    for category_id, count in counts.items():
        table.add_row(category_label(category_id, categories), str(count))
    return table


def __details_table(tasks: list[Task], categories: list[Category]) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("title")
    table.add_column("flavor")
    table.add_column("when")
    for task in tasks:
        table.add_row(
            task["title"],
            category_label(task["category_id"], categories),
            datetime_to_display_local_datetime_str(finished_at(task)),
        )
    return table
