# SPDX-License-Identifier: MIT

import typer

from cakecrumb.terminal import bakery, configuration, rewards, task, timer
from cakecrumb.terminal.custom_typer import OrderedAliasedTyperGroup
from cakecrumb.terminal.progress import achievements, stats

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="CakeCrumb - bake your tasks, eat your rewards",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t", help="Add, complete and throw out tasks")
app.add_typer(timer.app, name="timer, ti", help="Focus timers that earn berries")
app.add_typer(bakery.app, name="bakery, b", help="Buy flavors with berries")
app.add_typer(rewards.app, name="rewards, r", help="Spend coins on rewards")
app.add_typer(configuration.app, name="config, c", help="View or change settings")
app.command(name="achievements, ach")(achievements)
app.command(name="stats, s")(stats)


def run() -> None:
    app()
