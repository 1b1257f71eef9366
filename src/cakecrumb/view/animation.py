# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.panel import Panel

from cakecrumb.model.animation import AnimationSignal
from cakecrumb.model.task import Task


def animation_view(signal: AnimationSignal, task: Optional[Task]) -> None:
    if signal["type"] is None:
        return

    title = task["title"] if task is not None else "this task"
    if signal["type"] == "eat":
        message = f"[bold green]Nom nom![/bold green] You ate the cake: {title}"
        border_style = "green"
    else:
        message = f"[bold dark_olive_green3]Eww.[/bold dark_olive_green3] {title} went stale"
        border_style = "dark_olive_green3"

    console = Console()
    console.print(Panel(message, border_style=border_style, expand=False))
