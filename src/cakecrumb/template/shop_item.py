# SPDX-License-Identifier: MIT

from cakecrumb.model.entity_id import generate_entity_id
from cakecrumb.model.shop_item import ShopItem


def get_default_shop_items() -> list[ShopItem]:
    return [
        {
            "id": "coffee",
            "name": "Coffee Break",
            "description": "Take a 15 minute coffee break",
            "price": 50,
            "glyph": "☕",
            "is_custom": False,
        },
        {
            "id": "snack",
            "name": "Snack Time",
            "description": "Enjoy your favorite snack",
            "price": 100,
            "glyph": "🍫",
            "is_custom": False,
        },
        {
            "id": "movie",
            "name": "Movie Night",
            "description": "Watch your favorite movie",
            "price": 300,
            "glyph": "🎬",
            "is_custom": False,
        },
        {
            "id": "book",
            "name": "Book Time",
            "description": "Read a chapter of your book",
            "price": 200,
            "glyph": "📚",
            "is_custom": False,
        },
        {
            "id": "nap",
            "name": "Power Nap",
            "description": "Take a 20 minute power nap",
            "price": 250,
            "glyph": "💤",
            "is_custom": False,
        },
    ]


def get_custom_shop_item_template(
    name: str, description: str, price: int, glyph: str
) -> ShopItem:
    return {
        "id": generate_entity_id(),
        "name": name,
        "description": description,
        "price": price,
        "glyph": glyph,
        "is_custom": True,
    }
