# SPDX-License-Identifier: MIT

from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.service.validate import require_amount


def add_coins(state: GameState, amount: int) -> None:
    require_amount(amount)
    state.coins += amount
    state.mark_dirty(StateKey.COINS)


def add_berries(state: GameState, amount: int) -> None:
    require_amount(amount)
    state.berries += amount
    state.mark_dirty(StateKey.BERRIES)


def spend_coins(state: GameState, price: int) -> bool:
    """Debit coins if the balance covers the price. Never goes negative."""
    if not can_afford(state.coins, price):
        return False
    state.coins -= price
    state.mark_dirty(StateKey.COINS)
    return True


def spend_berries(state: GameState, price: int) -> bool:
    """Debit berries if the balance covers the price. Never goes negative."""
    if not can_afford(state.berries, price):
        return False
    state.berries -= price
    state.mark_dirty(StateKey.BERRIES)
    return True


def can_afford(balance: int, price: int) -> bool:
    return price >= 0 and balance >= price
