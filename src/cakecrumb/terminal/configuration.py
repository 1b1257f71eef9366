# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from cakecrumb import configuration
from cakecrumb.repository.configuration import ConfigurationRepository
from cakecrumb.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __get_repository(ctx: typer.Context) -> ConfigurationRepository:
    repository = ctx.find_object(ConfigurationRepository)
    if repository is None:
        repository = ConfigurationRepository()
    return repository


@app.command("view, v")
def view(ctx: typer.Context) -> None:
    """Display current configuration settings."""
    config = __get_repository(ctx).get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "data_path",
        str(configuration.resolve_data_path(config))
        + ("" if config["data_path"] is not None else " (default)"),
    )
    table.add_row("starting_coins", str(config["starting_coins"]))
    table.add_row("starting_berries", str(config["starting_berries"]))
    table.add_row("timer_min_minutes", str(config["timer_min_minutes"]))
    table.add_row("timer_max_minutes", str(config["timer_max_minutes"]))
    table.add_row(
        "multi_level_up",
        "✓ Enabled" if config["multi_level_up"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
def set(
    ctx: typer.Context,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory for the JSON data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the platform data path"),
    ] = False,
    starting_coins: Annotated[
        Optional[int],
        typer.Option("--starting-coins", min=0, help="Coins granted on first run"),
    ] = None,
    starting_berries: Annotated[
        Optional[int],
        typer.Option("--starting-berries", min=0, help="Berries granted on first run"),
    ] = None,
    timer_min_minutes: Annotated[
        Optional[int],
        typer.Option("--timer-min-minutes", min=1, help="Shortest focus timer"),
    ] = None,
    timer_max_minutes: Annotated[
        Optional[int],
        typer.Option("--timer-max-minutes", min=1, help="Longest focus timer"),
    ] = None,
    multi_level_up: Annotated[
        Optional[bool],
        typer.Option(
            "--multi-level-up/--single-level-up",
            help="Allow one experience gain to cross several levels",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Change configuration settings."""
    repository = __get_repository(ctx)
    config = repository.get_config()

    new_min = timer_min_minutes or config["timer_min_minutes"]
    new_max = timer_max_minutes or config["timer_max_minutes"]
    if new_min > new_max:
        raise typer.BadParameter(
            f"timer_min_minutes ({new_min}) must not exceed "
            f"timer_max_minutes ({new_max})"
        )

    repository.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        starting_coins=starting_coins,
        starting_berries=starting_berries,
        timer_min_minutes=timer_min_minutes,
        timer_max_minutes=timer_max_minutes,
        multi_level_up=multi_level_up,
        log_level=log_level.upper() if log_level is not None else None,
    )
    repository.flush()
    view(ctx)
