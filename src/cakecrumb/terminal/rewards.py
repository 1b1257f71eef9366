# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from cakecrumb.engine import DEFAULT_SHOP_ITEM_GLYPH
from cakecrumb.terminal.context import get_engine
from cakecrumb.terminal.custom_typer import AliasedTyperGroup
from cakecrumb.terminal.parse import resolve_id
from cakecrumb.terminal.validate import report_validation_errors
from cakecrumb.view.header import header
from cakecrumb.view.shop import shop_items_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_rewards(ctx: typer.Context) -> None:
    engine = get_engine(ctx)
    header("rewards", engine.user_stats, engine.coins, engine.berries)
    shop_items_view(engine.shop_items, engine.coins)


@app.command("buy, b", no_args_is_help=True)
def buy(ctx: typer.Context, id: str) -> None:
    engine = get_engine(ctx)
    item_id = resolve_id(id, [i["id"] for i in engine.shop_items], "reward")
    item = next((i for i in engine.shop_items if i["id"] == item_id), None)

    console = Console()
    if item is None:
        console.print(f"[yellow]No reward {id!r} in the shop.[/yellow]")
        raise typer.Exit(code=1)
    if not engine.purchase_shop_item(item_id):
        console.print(
            f"[red]You need {item['price'] - engine.coins} more coins "
            f"for {item['name']}.[/red]"
        )
        raise typer.Exit(code=1)

    console.print(f"[green]Enjoy your {item['name']}! {item['glyph']}[/green]")


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    name: str,
    description: Annotated[str, typer.Option("--description", "-d")] = "",
    price: Annotated[int, typer.Option("--price", "-p")] = 100,
    glyph: Annotated[str, typer.Option("--glyph", "-g")] = DEFAULT_SHOP_ITEM_GLYPH,
) -> None:
    engine = get_engine(ctx)

    with report_validation_errors():
        item = engine.add_custom_shop_item(name, description, price, glyph)

    Console().print(f"[green]Added reward {item['name']}.[/green]")
