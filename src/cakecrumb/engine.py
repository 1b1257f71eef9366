# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

import pendulum

from cakecrumb import time
from cakecrumb.configuration import Configuration, get_default_configuration
from cakecrumb.model.achievement import Achievement
from cakecrumb.model.animation import AnimationSignal
from cakecrumb.model.category import DEFAULT_CATEGORY_ID, Category
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.history import TaskHistory
from cakecrumb.model.shop_item import ShopItem
from cakecrumb.model.task import Task, is_active
from cakecrumb.model.timer_session import TimerSession
from cakecrumb.model.user_stats import UserStats
from cakecrumb.repository.state import StateRepository
from cakecrumb.repository.store import Store
from cakecrumb.service import (
    achievement,
    economy,
    history,
    progression,
    shop,
    streak,
    task,
    timer,
)
from cakecrumb.template.animation import get_animation_template

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_SHOP_ITEM_GLYPH = "🎁"


def persist(func: F) -> F:
    """
    Write every key the operation touched back to the store.

    Nothing is written when the operation raises; keys it already marked
    stay dirty and go out with the next successful flush.
    """

    @wraps(func)
    def wrapper(self: "ProgressionEngine", *args: Any, **kwargs: Any) -> Any:
        result = func(self, *args, **kwargs)
        self._repository.flush(self._state)
        return result

    return wrapper  # type: ignore[return-value]


class ProgressionEngine:
    """
    Owner of all task tracker state and the only way to change it.

    Every operation validates, mutates and persists before returning.
    Operations given an unknown id do nothing and report that through their
    return value; only malformed input raises ``ValidationError``.

    The streak is evaluated once on construction using ``clock``.
    """

    def __init__(
        self,
        store: Store,
        config: Optional[Configuration] = None,
        clock: Callable[[], pendulum.DateTime] = time.now_utc,
    ) -> None:
        self._config = config if config is not None else get_default_configuration()
        self._clock = clock
        self._repository = StateRepository(store)
        self._state = self._repository.load_state(self._config)
        self.check_and_update_streak()

    @property
    def _multi_level_up(self) -> bool:
        return self._config["multi_level_up"]

    # Tasks

    @property
    def tasks(self) -> list[Task]:
        return deepcopy(self._state.tasks)

    @property
    def active_tasks(self) -> list[Task]:
        return deepcopy([t for t in self._state.tasks if is_active(t)])

    @property
    def completed_tasks(self) -> list[Task]:
        return deepcopy([t for t in self._state.tasks if t["completed"]])

    @property
    def deleted_tasks(self) -> list[Task]:
        return deepcopy([t for t in self._state.tasks if t["deleted"]])

    def get_task(self, id: EntityId) -> Optional[Task]:
        return deepcopy(self._state.find_task(id))

    def task_history(
        self, period: str = "all", category_id: Optional[EntityId] = None
    ) -> TaskHistory:
        """Eaten and rotten tasks for a period of the engine clock's calendar."""
        return deepcopy(
            history.task_history(self._state, self._clock(), period, category_id)
        )

    @persist
    def add_task(
        self,
        title: str,
        category_id: EntityId = DEFAULT_CATEGORY_ID,
        difficulty: str = "medium",
    ) -> Task:
        new_task = task.add_task(
            self._state,
            title,
            category_id,
            difficulty,
            self._clock(),
            self._multi_level_up,
        )
        return deepcopy(new_task)

    @persist
    def complete_task(self, id: EntityId) -> bool:
        completed = task.complete_task(
            self._state, id, self._clock(), self._multi_level_up
        )
        return completed is not None

    @persist
    def delete_task(self, id: EntityId) -> bool:
        return task.delete_task(self._state, id, self._clock()) is not None

    # Timers

    @property
    def timer_sessions(self) -> list[TimerSession]:
        return deepcopy(self._state.timer_sessions)

    def get_timer_session(self, id: EntityId) -> Optional[TimerSession]:
        return deepcopy(self._state.find_timer_session(id))

    @persist
    def start_timer(self, task_id: EntityId, duration_minutes: int) -> EntityId:
        session = timer.start_timer(
            self._state,
            task_id,
            duration_minutes,
            self._clock(),
            self._config["timer_min_minutes"],
            self._config["timer_max_minutes"],
        )
        return session["id"]

    @persist
    def complete_timer(self, id: EntityId) -> bool:
        completed = timer.complete_timer(
            self._state, id, self._clock(), self._multi_level_up
        )
        return completed is not None

    # Currencies

    @property
    def coins(self) -> int:
        return self._state.coins

    @property
    def berries(self) -> int:
        return self._state.berries

    @persist
    def add_coins(self, amount: int) -> None:
        economy.add_coins(self._state, amount)

    @persist
    def add_berries(self, amount: int) -> None:
        economy.add_berries(self._state, amount)

    # Shops

    @property
    def categories(self) -> list[Category]:
        return deepcopy(self._state.categories)

    @property
    def owned_categories(self) -> list[Category]:
        return deepcopy([c for c in self._state.categories if c["owned"]])

    @property
    def shop_items(self) -> list[ShopItem]:
        return deepcopy(self._state.shop_items)

    @persist
    def purchase_category(self, id: EntityId) -> bool:
        return shop.purchase_category(self._state, id, self._multi_level_up)

    @persist
    def add_custom_category(
        self, name: str, color: Optional[str] = None, price: int = 50
    ) -> Category:
        category = shop.add_custom_category(
            self._state, name, color, price, self._multi_level_up
        )
        return deepcopy(category)

    @persist
    def purchase_shop_item(self, id: EntityId) -> bool:
        return shop.purchase_shop_item(self._state, id)

    @persist
    def add_custom_shop_item(
        self,
        name: str,
        description: str = "",
        price: int = 100,
        glyph: str = DEFAULT_SHOP_ITEM_GLYPH,
    ) -> ShopItem:
        item = shop.add_custom_shop_item(self._state, name, description, price, glyph)
        return deepcopy(item)

    # Achievements

    @property
    def achievements(self) -> list[Achievement]:
        return deepcopy(self._state.achievements)

    def get_achievement(self, id: EntityId) -> Optional[Achievement]:
        return deepcopy(self._state.find_achievement(id))

    @persist
    def unlock_achievement(self, id: EntityId) -> bool:
        return achievement.unlock_achievement(self._state, id, self._multi_level_up)

    @persist
    def increment_achievement_progress(self, id: EntityId, amount: int = 1) -> bool:
        return achievement.increment_achievement_progress(
            self._state, id, amount, self._multi_level_up
        )

    # Progression

    @property
    def user_stats(self) -> UserStats:
        return deepcopy(self._state.user_stats)

    @persist
    def gain_experience(self, amount: int) -> int:
        return progression.gain_experience(self._state, amount, self._multi_level_up)

    @persist
    def check_and_update_streak(self) -> None:
        today = time.local_date(self._clock())
        streak.check_and_update_streak(self._state, today, self._multi_level_up)

    # Animation

    @property
    def animation(self) -> AnimationSignal:
        return deepcopy(self._state.animation)

    def clear_animation(self) -> None:
        self._state.animation = get_animation_template()

    def snapshot(self) -> dict[str, Any]:
        """Everything a collaborator renders, as one deep copy."""
        return {
            "tasks": self.tasks,
            "timer_sessions": self.timer_sessions,
            "coins": self.coins,
            "berries": self.berries,
            "categories": self.categories,
            "shop_items": self.shop_items,
            "achievements": self.achievements,
            "user_stats": self.user_stats,
            "animation": self.animation,
        }
