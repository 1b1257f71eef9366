# SPDX-License-Identifier: MIT

from typing import Any

import pendulum

from cakecrumb.model.game_state import GameState
from cakecrumb.template.achievement import get_default_achievements
from cakecrumb.template.category import get_default_categories
from cakecrumb.template.shop_item import get_default_shop_items
from cakecrumb.template.user_stats import get_user_stats_template

# Midday keeps the local calendar date stable whatever the machine timezone
FIXED_NOW = pendulum.datetime(2026, 10, 19, 12, 0, 0, tz="local")
TODAY = FIXED_NOW.date()


class FakeClock:
    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def __call__(self) -> pendulum.DateTime:
        return self.now

    def advance(self, **kwargs: Any) -> None:
        self.now = self.now.add(**kwargs)


def make_state(coins: int = 100, berries: int = 50) -> GameState:
    return GameState(
        tasks=[],
        timer_sessions=[],
        coins=coins,
        berries=berries,
        categories=get_default_categories(),
        shop_items=get_default_shop_items(),
        achievements=get_default_achievements(),
        user_stats=get_user_stats_template(),
    )
