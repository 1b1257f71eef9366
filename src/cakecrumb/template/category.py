# SPDX-License-Identifier: MIT

from cakecrumb.model.category import DEFAULT_CATEGORY_ID, Category
from cakecrumb.model.entity_id import generate_entity_id


def get_default_categories() -> list[Category]:
    return [
        {
            "id": DEFAULT_CATEGORY_ID,
            "name": "Vanilla",
            "color": "#FEF7CD",
            "price": 0,
            "owned": True,
            "is_custom": False,
        },
        {
            "id": "strawberry",
            "name": "Strawberry",
            "color": "#FFDEE2",
            "price": 50,
            "owned": False,
            "is_custom": False,
        },
        {
            "id": "chocolate",
            "name": "Chocolate",
            "color": "#8B4513",
            "price": 50,
            "owned": False,
            "is_custom": False,
        },
        {
            "id": "mint",
            "name": "Mint",
            "color": "#F2FCE2",
            "price": 75,
            "owned": False,
            "is_custom": False,
        },
        {
            "id": "blueberry",
            "name": "Blueberry",
            "color": "#E5DEFF",
            "price": 75,
            "owned": False,
            "is_custom": False,
        },
        {
            "id": "rainbow",
            "name": "Rainbow",
            "color": "bright_magenta",
            "price": 150,
            "owned": False,
            "is_custom": False,
        },
    ]


def get_custom_category_template(name: str, color: str, price: int) -> Category:
    return {
        "id": generate_entity_id(),
        "name": name,
        "color": color,
        "price": price,
        "owned": True,
        "is_custom": True,
    }
