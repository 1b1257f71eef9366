# SPDX-License-Identifier: MIT

"""Tests for currencies and the two shops."""

import pytest

from cakecrumb.color import FROSTING_COLORS
from cakecrumb.errors import ValidationError
from cakecrumb.model.achievement import AchievementId
from cakecrumb.model.game_state import GameState
from cakecrumb.service import economy
from cakecrumb.service.achievement import ACHIEVEMENT_EXPERIENCE_BONUS
from cakecrumb.service.shop import (
    add_custom_category,
    add_custom_shop_item,
    purchase_category,
    purchase_shop_item,
)


def collector_progress(state: GameState) -> int:
    collector = state.find_achievement(AchievementId.COLLECTOR)
    assert collector is not None
    return collector["progress"] or 0


# =============================================================================
# Test: economy credits and debits
# =============================================================================


class TestEconomy:
    def test_credits_add_up(self, state: GameState) -> None:
        economy.add_coins(state, 25)
        economy.add_berries(state, 5)

        assert state.coins == 125
        assert state.berries == 55

    def test_negative_credit_rejected(self, state: GameState) -> None:
        with pytest.raises(ValidationError):
            economy.add_coins(state, -10)
        with pytest.raises(ValidationError):
            economy.add_berries(state, -1)
        assert state.coins == 100
        assert state.berries == 50

    @pytest.mark.parametrize("amount", [0.5, 10.0, False])
    def test_non_integer_credit_rejected(
        self, state: GameState, amount: object
    ) -> None:
        with pytest.raises(ValidationError):
            economy.add_coins(state, amount)  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            economy.add_berries(state, amount)  # type: ignore[arg-type]

        assert state.coins == 100
        assert state.berries == 50

    def test_spend_never_goes_negative(self, state: GameState) -> None:
        assert not economy.spend_coins(state, 101)
        assert state.coins == 100

        assert economy.spend_coins(state, 100)
        assert state.coins == 0

    def test_can_afford(self) -> None:
        assert economy.can_afford(50, 50)
        assert not economy.can_afford(49, 50)
        assert not economy.can_afford(100, -1)


# =============================================================================
# Test: category (flavor) purchases, paid in berries
# =============================================================================


class TestPurchaseCategory:
    def test_purchase_debits_berries_and_marks_owned(self, state: GameState) -> None:
        assert purchase_category(state, "strawberry")

        strawberry = state.find_category("strawberry")
        assert strawberry is not None
        assert strawberry["owned"]
        assert state.berries == 0
        assert state.coins == 100
        assert collector_progress(state) == 2

    def test_second_purchase_fails_without_debit(self, state: GameState) -> None:
        state.berries = 200
        purchase_category(state, "strawberry")

        assert not purchase_category(state, "strawberry")
        assert state.berries == 150

    def test_unaffordable_purchase_changes_nothing(self, state: GameState) -> None:
        assert not purchase_category(state, "mint")

        mint = state.find_category("mint")
        assert mint is not None
        assert not mint["owned"]
        assert state.berries == 50
        assert state.dirty_keys == set()

    def test_unknown_category_fails(self, state: GameState) -> None:
        assert not purchase_category(state, "durian")

    def test_owning_five_flavors_unlocks_collector(self, state: GameState) -> None:
        state.berries = 1000

        for flavor in ("strawberry", "chocolate", "mint", "blueberry"):
            assert purchase_category(state, flavor)

        collector = state.find_achievement(AchievementId.COLLECTOR)
        assert collector is not None
        assert collector["is_unlocked"]
        assert collector["progress"] == 5
        assert state.user_stats["experience"] == ACHIEVEMENT_EXPERIENCE_BONUS


class TestAddCustomCategory:
    def test_custom_category_is_owned_and_free(self, state: GameState) -> None:
        category = add_custom_category(state, "Lemon", "#FFF44F", 500)

        assert category["owned"]
        assert category["is_custom"]
        assert category["price"] == 500
        assert state.berries == 50
        assert category in state.categories

    def test_counts_toward_collector(self, state: GameState) -> None:
        add_custom_category(state, "Lemon", "#FFF44F", 10)

        assert collector_progress(state) == 2

    def test_missing_color_gets_a_frosting_color(self, state: GameState) -> None:
        category = add_custom_category(state, "Matcha", None, 10)

        assert category["color"] in FROSTING_COLORS

    def test_name_is_trimmed(self, state: GameState) -> None:
        assert add_custom_category(state, "  Lemon ", None, 10)["name"] == "Lemon"

    @pytest.mark.parametrize(("name", "price"), [("", 10), ("   ", 10), ("Lemon", 0)])
    def test_invalid_input_rejected(
        self, state: GameState, name: str, price: int
    ) -> None:
        with pytest.raises(ValidationError):
            add_custom_category(state, name, None, price)
        assert len(state.categories) == 6


# =============================================================================
# Test: shop item (reward) purchases, paid in coins
# =============================================================================


class TestPurchaseShopItem:
    def test_purchase_debits_coins(self, state: GameState) -> None:
        assert purchase_shop_item(state, "coffee")

        assert state.coins == 50
        assert state.berries == 50

    def test_items_can_be_bought_repeatedly(self, state: GameState) -> None:
        assert purchase_shop_item(state, "coffee")
        assert purchase_shop_item(state, "coffee")
        assert not purchase_shop_item(state, "coffee")
        assert state.coins == 0

    def test_unaffordable_item_fails(self, state: GameState) -> None:
        assert not purchase_shop_item(state, "movie")
        assert state.coins == 100

    def test_unknown_item_fails(self, state: GameState) -> None:
        assert not purchase_shop_item(state, "yacht")

    def test_purchase_has_no_achievement_effect(self, state: GameState) -> None:
        purchase_shop_item(state, "coffee")

        assert not any(a["is_unlocked"] for a in state.achievements)
        assert state.user_stats["experience"] == 0


class TestAddCustomShopItem:
    def test_adds_catalog_entry_without_cost(self, state: GameState) -> None:
        item = add_custom_shop_item(state, "Bubble bath", " Relax ", 120, "🛁")

        assert item["is_custom"]
        assert item["description"] == "Relax"
        assert state.shop_items[-1] == item
        assert len(state.shop_items) == 6
        assert state.coins == 100

    def test_non_positive_price_rejected(self, state: GameState) -> None:
        with pytest.raises(ValidationError):
            add_custom_shop_item(state, "Free lunch", "", 0, "🥪")
