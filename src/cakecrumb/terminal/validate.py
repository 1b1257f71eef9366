# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich.console import Console

from cakecrumb.errors import ValidationError
from cakecrumb.model.history import HISTORY_PERIODS
from cakecrumb.model.task import DIFFICULTIES


def validate_difficulty(difficulty: Optional[str]) -> Optional[str]:
    if difficulty is None:
        return None
    if difficulty not in DIFFICULTIES:
        choices = ", ".join(DIFFICULTIES)
        raise typer.BadParameter(f"Difficulty must be one of {choices}")
    return difficulty


@contextmanager
def report_validation_errors() -> Iterator[None]:
    """Turn a rejected engine operation into a message and exit code 1."""
    try:
        yield
    except ValidationError as error:
        Console(stderr=True).print(f"[red]Invalid {error.field}: {error.message}[/red]")
        raise typer.Exit(code=1) from error


def validate_period(period: Optional[str]) -> Optional[str]:
    if period is None:
        return None
    if period not in HISTORY_PERIODS:
        choices = ", ".join(HISTORY_PERIODS)
        raise typer.BadParameter(f"Period must be one of {choices}")
    return period
