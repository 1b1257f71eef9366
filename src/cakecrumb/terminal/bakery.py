# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from cakecrumb.terminal.context import get_engine
from cakecrumb.terminal.custom_typer import AliasedTyperGroup
from cakecrumb.terminal.parse import resolve_id
from cakecrumb.terminal.validate import report_validation_errors
from cakecrumb.view.header import header
from cakecrumb.view.shop import categories_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_categories(ctx: typer.Context) -> None:
    engine = get_engine(ctx)
    header("bakery", engine.user_stats, engine.coins, engine.berries)
    categories_view(engine.categories, engine.berries)


@app.command("buy, b", no_args_is_help=True)
def buy(ctx: typer.Context, id: str) -> None:
    engine = get_engine(ctx)
    category_id = resolve_id(id, [c["id"] for c in engine.categories], "flavor")
    category = next((c for c in engine.categories if c["id"] == category_id), None)

    console = Console()
    if category is None:
        console.print(f"[yellow]No flavor {id!r} in the bakery.[/yellow]")
        raise typer.Exit(code=1)
    if category["owned"]:
        console.print(f"[yellow]You already own {category['name']}.[/yellow]")
        raise typer.Exit(code=1)
    if not engine.purchase_category(category_id):
        console.print(
            f"[red]You need {category['price'] - engine.berries} more berries "
            f"for {category['name']}.[/red]"
        )
        raise typer.Exit(code=1)

    console.print(f"[green]You unlocked the {category['name']} flavor![/green]")


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    name: str,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-col", help="any rich color, e.g. #FFDEE2"),
    ] = None,
    price: Annotated[int, typer.Option("--price", "-p")] = 50,
) -> None:
    engine = get_engine(ctx)

    with report_validation_errors():
        category = engine.add_custom_category(name, color, price)

    Console().print(f"[green]Created flavor {category['name']}.[/green]")
