# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from cakecrumb.color import get_random_color
from cakecrumb.errors import ValidationError
from cakecrumb.model.achievement import AchievementId
from cakecrumb.model.category import Category
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.model.shop_item import ShopItem
from cakecrumb.service import achievement, economy
from cakecrumb.template.category import get_custom_category_template
from cakecrumb.template.shop_item import get_custom_shop_item_template

logger = logging.getLogger(__name__)


def purchase_category(
    state: GameState, id: EntityId, multi_level_up: bool = False
) -> bool:
    """Categories are paid for in berries."""
    category = state.find_category(id)
    if category is None or category["owned"]:
        return False
    if not economy.spend_berries(state, category["price"]):
        logger.info(
            "Cannot afford %r: %d berries, costs %d",
            id,
            state.berries,
            category["price"],
        )
        return False

    category["owned"] = True
    state.mark_dirty(StateKey.CATEGORIES)
    logger.info("Purchased category %r for %d berries", id, category["price"])

    __count_toward_collector(state, multi_level_up)
    return True


def add_custom_category(
    state: GameState,
    name: str,
    color: Optional[str],
    price: int,
    multi_level_up: bool = False,
) -> Category:
    """A category the user defines is theirs immediately, whatever its price."""
    name = __require_name(name)
    __require_positive_price(price)

    category = get_custom_category_template(
        name, color if color else get_random_color(), price
    )
    state.categories.append(category)
    state.mark_dirty(StateKey.CATEGORIES)

    __count_toward_collector(state, multi_level_up)
    return category


def purchase_shop_item(state: GameState, id: EntityId) -> bool:
    """Shop items are paid for in coins."""
    item = state.find_shop_item(id)
    if item is None:
        return False
    if not economy.spend_coins(state, item["price"]):
        logger.info(
            "Cannot afford %r: %d coins, costs %d", id, state.coins, item["price"]
        )
        return False
    logger.info("Redeemed %r for %d coins", id, item["price"])
    return True


def add_custom_shop_item(
    state: GameState, name: str, description: str, price: int, glyph: str
) -> ShopItem:
    name = __require_name(name)
    __require_positive_price(price)

    item = get_custom_shop_item_template(name, description.strip(), price, glyph)
    state.shop_items.append(item)
    state.mark_dirty(StateKey.SHOP_ITEMS)
    return item


def __count_toward_collector(state: GameState, multi_level_up: bool) -> None:
    owned_count = sum(1 for category in state.categories if category["owned"])
    achievement.sync_achievement_progress(
        state, AchievementId.COLLECTOR, owned_count, multi_level_up
    )


def __require_name(name: str) -> str:
    name = name.strip()
    if name == "":
        raise ValidationError("name", "must not be empty")
    return name


def __require_positive_price(price: int) -> None:
    if isinstance(price, bool) or not isinstance(price, int) or price <= 0:
        raise ValidationError(
            "price", f"must be a positive whole number, got {price!r}"
        )
