# SPDX-License-Identifier: MIT

from typing import TypedDict

from cakecrumb.model.entity_id import EntityId


class ShopItem(TypedDict):
    id: EntityId
    name: str
    description: str
    price: int  # coins
    glyph: str
    is_custom: bool
