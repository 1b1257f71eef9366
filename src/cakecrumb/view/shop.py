# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from cakecrumb.model.category import Category
from cakecrumb.model.shop_item import ShopItem
from cakecrumb.service.economy import can_afford
from cakecrumb.view.util import colored, short_id


def categories_view(categories: list[Category], berries: int) -> None:
    """The bakery: flavors priced in berries."""
    bakery_table = Table(box=box.SIMPLE)
    bakery_table.add_column("id")
    bakery_table.add_column("flavor")
    bakery_table.add_column("price", justify="right")
    bakery_table.add_column("status")

    for category in categories:
        if category["owned"]:
            status = "[green]owned[/green]"
        elif can_afford(berries, category["price"]):
            status = "for sale"
        else:
            status = "[dim]too pricey[/dim]"
        if category["is_custom"]:
            status += " [italic](custom)[/italic]"

        bakery_table.add_row(
            short_id(category["id"]),
            colored(category["name"], category["color"]),
            f"{category['price']} berries",
            status,
        )

    console = Console()
    console.print(bakery_table)


def shop_items_view(shop_items: list[ShopItem], coins: int) -> None:
    rewards_table = Table(box=box.SIMPLE)
    rewards_table.add_column("id")
    rewards_table.add_column("")
    rewards_table.add_column("reward")
    rewards_table.add_column("description")
    rewards_table.add_column("price", justify="right")

    for item in shop_items:
        price = f"{item['price']} coins"
        if not can_afford(coins, item["price"]):
            price = f"[dim]{price}[/dim]"
        rewards_table.add_row(
            short_id(item["id"]),
            item["glyph"],
            item["name"],
            item["description"],
            price,
        )

    console = Console()
    console.print(rewards_table)
