# SPDX-License-Identifier: MIT

import typer
from rich.console import Console

from cakecrumb.terminal.context import get_engine
from cakecrumb.terminal.custom_typer import AliasedTyperGroup
from cakecrumb.terminal.parse import resolve_id
from cakecrumb.terminal.validate import report_validation_errors
from cakecrumb.view.header import header
from cakecrumb.view.timer import timers_view
from cakecrumb.view.util import short_id

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("start, s", no_args_is_help=True)
def start(ctx: typer.Context, task_id: str, minutes: int) -> None:
    engine = get_engine(ctx)
    resolved_task_id = resolve_id(task_id, [t["id"] for t in engine.tasks], "task")

    with report_validation_errors():
        session_id = engine.start_timer(resolved_task_id, minutes)

    Console().print(
        f"[cyan]Timer {short_id(session_id)} started for {minutes} minutes.[/cyan]"
    )


@app.command("complete, c", no_args_is_help=True)
def complete(ctx: typer.Context, id: str) -> None:
    engine = get_engine(ctx)
    session_id = resolve_id(id, [s["id"] for s in engine.timer_sessions], "timer")

    berries_before = engine.berries
    if not engine.complete_timer(session_id):
        Console().print(f"[yellow]No running timer {id!r}.[/yellow]")
        return

    Console().print(
        f"[green]Timer done! +{engine.berries - berries_before} berries[/green]"
    )


@app.command("list, ls")
def list_timers(ctx: typer.Context) -> None:
    engine = get_engine(ctx)
    header("timers", engine.user_stats, engine.coins, engine.berries)
    timers_view(engine.timer_sessions, engine.tasks)
