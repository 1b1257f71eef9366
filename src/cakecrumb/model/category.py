# SPDX-License-Identifier: MIT

from typing import TypedDict

from cakecrumb.model.entity_id import EntityId

DEFAULT_CATEGORY_ID: EntityId = "default"


class Category(TypedDict):
    id: EntityId
    name: str
    color: str
    price: int  # berries
    owned: bool
    is_custom: bool
