# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from cakecrumb.model.category import DEFAULT_CATEGORY_ID
from cakecrumb.terminal.context import get_engine
from cakecrumb.terminal.custom_typer import AliasedTyperGroup
from cakecrumb.terminal.parse import resolve_id
from cakecrumb.terminal.validate import (
    report_validation_errors,
    validate_difficulty,
    validate_period,
)
from cakecrumb.view.animation import animation_view
from cakecrumb.view.header import header
from cakecrumb.view.history import fridge_view
from cakecrumb.view.task import single_task_view, tasks_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    title: str,
    flavor: Annotated[
        str,
        typer.Option("--flavor", "-f", help="id of an owned flavor"),
    ] = DEFAULT_CATEGORY_ID,
    difficulty: Annotated[
        str,
        typer.Option(
            "--difficulty",
            "-d",
            callback=validate_difficulty,
            help="valid input: easy, medium, hard",
        ),
    ] = "medium",
) -> None:
    engine = get_engine(ctx)
    category_id = resolve_id(flavor, [c["id"] for c in engine.categories], "flavor")

    with report_validation_errors():
        task = engine.add_task(title, category_id, difficulty)

    single_task_view(task, engine.categories)


@app.command("complete, c", no_args_is_help=True)
def complete(ctx: typer.Context, id: str) -> None:
    engine = get_engine(ctx)
    task_id = resolve_id(id, [t["id"] for t in engine.tasks], "task")

    if not engine.complete_task(task_id):
        Console().print(f"[yellow]No fresh task {id!r} to complete.[/yellow]")
        return

    __show_animation(ctx)


@app.command("delete, d", no_args_is_help=True)
def delete(ctx: typer.Context, id: str) -> None:
    engine = get_engine(ctx)
    task_id = resolve_id(id, [t["id"] for t in engine.tasks], "task")

    if not engine.delete_task(task_id):
        Console().print(f"[yellow]No fresh task {id!r} to throw out.[/yellow]")
        return

    __show_animation(ctx)


@app.command("list, ls")
def list_tasks(
    ctx: typer.Context,
    all: Annotated[
        bool,
        typer.Option("--all", "-a", help="include eaten and rotten tasks"),
    ] = False,
) -> None:
    engine = get_engine(ctx)
    tasks = engine.tasks if all else engine.active_tasks

    header("tasks", engine.user_stats, engine.coins, engine.berries)
    tasks_view(tasks, engine.categories)


@app.command("fridge, f")
def fridge(
    ctx: typer.Context,
    period: Annotated[
        str,
        typer.Option(
            "--period",
            "-p",
            callback=validate_period,
            help="valid input: today, week, month, all",
        ),
    ] = "today",
    flavor: Annotated[
        Optional[str],
        typer.Option("--flavor", "-f", help="only cakes of this flavor"),
    ] = None,
) -> None:
    """Eaten and rotten cakes, counted per flavor"""
    engine = get_engine(ctx)
    category_id = (
        resolve_id(flavor, [c["id"] for c in engine.categories], "flavor")
        if flavor is not None
        else None
    )

    with report_validation_errors():
        history = engine.task_history(period, category_id)

    header("fridge", engine.user_stats, engine.coins, engine.berries)
    fridge_view(history, engine.categories)


def __show_animation(ctx: typer.Context) -> None:
    engine = get_engine(ctx)
    signal = engine.animation
    task = engine.get_task(signal["task_id"]) if signal["task_id"] else None
    animation_view(signal, task)
    engine.clear_animation()
