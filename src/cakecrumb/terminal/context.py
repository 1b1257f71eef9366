# SPDX-License-Identifier: MIT

import typer

from cakecrumb.engine import ProgressionEngine
from cakecrumb.initialize import initialize


def get_engine(ctx: typer.Context) -> ProgressionEngine:
    """The engine built by the root callback, shared by every subcommand."""
    engine = ctx.find_object(ProgressionEngine)
    if engine is None:
        engine = initialize()
        ctx.find_root().obj = engine
    return engine
