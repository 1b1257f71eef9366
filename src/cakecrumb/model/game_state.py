# SPDX-License-Identifier: MIT

from typing import Optional

from cakecrumb.model.achievement import Achievement
from cakecrumb.model.animation import AnimationSignal
from cakecrumb.model.category import Category
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.shop_item import ShopItem
from cakecrumb.model.task import Task
from cakecrumb.model.timer_session import TimerSession
from cakecrumb.model.user_stats import UserStats
from cakecrumb.template.animation import get_animation_template


class StateKey:
    TASKS = "tasks"
    TIMERS = "timers"
    COINS = "coins"
    BERRIES = "berries"
    CATEGORIES = "categories"
    SHOP_ITEMS = "shop_items"
    ACHIEVEMENTS = "achievements"
    USER_STATS = "user_stats"


STATE_KEYS: tuple[str, ...] = (
    StateKey.TASKS,
    StateKey.TIMERS,
    StateKey.COINS,
    StateKey.BERRIES,
    StateKey.CATEGORIES,
    StateKey.SHOP_ITEMS,
    StateKey.ACHIEVEMENTS,
    StateKey.USER_STATS,
)


class GameState:
    """
    Every persisted collection and balance, plus the transient animation
    signal. Rule functions mutate it in place and mark the keys they touch
    so the engine knows what to write back.
    """

    def __init__(
        self,
        tasks: list[Task],
        timer_sessions: list[TimerSession],
        coins: int,
        berries: int,
        categories: list[Category],
        shop_items: list[ShopItem],
        achievements: list[Achievement],
        user_stats: UserStats,
    ) -> None:
        self.tasks = tasks
        self.timer_sessions = timer_sessions
        self.coins = coins
        self.berries = berries
        self.categories = categories
        self.shop_items = shop_items
        self.achievements = achievements
        self.user_stats = user_stats
        self.animation: AnimationSignal = get_animation_template()
        self.dirty_keys: set[str] = set()

    def mark_dirty(self, *keys: str) -> None:
        self.dirty_keys.update(keys)

    def find_task(self, id: EntityId) -> Optional[Task]:
        return next((task for task in self.tasks if task["id"] == id), None)

    def find_timer_session(self, id: EntityId) -> Optional[TimerSession]:
        return next(
            (session for session in self.timer_sessions if session["id"] == id), None
        )

    def find_category(self, id: EntityId) -> Optional[Category]:
        return next(
            (category for category in self.categories if category["id"] == id), None
        )

    def find_shop_item(self, id: EntityId) -> Optional[ShopItem]:
        return next((item for item in self.shop_items if item["id"] == id), None)

    def find_achievement(self, id: EntityId) -> Optional[Achievement]:
        return next(
            (
                achievement
                for achievement in self.achievements
                if achievement["id"] == id
            ),
            None,
        )
