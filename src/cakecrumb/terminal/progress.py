# SPDX-License-Identifier: MIT

import typer

from cakecrumb.terminal.context import get_engine
from cakecrumb.view.header import header
from cakecrumb.view.progress import achievements_view, stats_view


def achievements(ctx: typer.Context) -> None:
    """Show unlocked and locked achievements"""
    engine = get_engine(ctx)
    header("achievements", engine.user_stats, engine.coins, engine.berries)
    achievements_view(engine.achievements)


def stats(ctx: typer.Context) -> None:
    """Show level, experience and streak"""
    engine = get_engine(ctx)
    header("stats", engine.user_stats, engine.coins, engine.berries)
    stats_view(engine.user_stats, engine.coins, engine.berries, engine.achievements)
