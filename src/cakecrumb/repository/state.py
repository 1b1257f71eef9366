# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from typing import Any, Callable, Optional, TypeVar, cast

from cakecrumb import time
from cakecrumb.configuration import Configuration
from cakecrumb.model.achievement import Achievement
from cakecrumb.model.category import Category
from cakecrumb.model.game_state import STATE_KEYS, GameState, StateKey
from cakecrumb.model.shop_item import ShopItem
from cakecrumb.model.task import DIFFICULTIES, Task
from cakecrumb.model.timer_session import TimerSession
from cakecrumb.model.user_stats import UserStats
from cakecrumb.repository.store import Store
from cakecrumb.template.achievement import get_default_achievements
from cakecrumb.template.category import get_default_categories
from cakecrumb.template.shop_item import get_default_shop_items
from cakecrumb.template.user_stats import get_user_stats_template

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Everything a parser may raise when handed foreign or corrupt data.
# json.JSONDecodeError and UnicodeDecodeError are both ValueErrors;
# deeply nested arrays exhaust the decoder with a RecursionError.
PARSE_ERRORS = (ValueError, KeyError, TypeError, RecursionError)


class StateRepository:
    def __init__(self, store: Store) -> None:
        self._store = store

    def load_or_seed(
        self,
        key: str,
        default_factory: Callable[[], T],
        parser: Callable[[Any], T],
    ) -> tuple[T, bool]:
        """
        Load and parse one key, falling back to a fresh default when the key
        is absent or its content cannot be parsed.

        Returns the value and whether it was seeded.
        """
        raw = self._store.load(key)
        if raw is None:
            logger.debug("No stored %r data, seeding defaults", key)
            return default_factory(), True

        try:
            return parser(json.loads(raw)), False
        except PARSE_ERRORS as error:
            logger.warning("Discarding malformed %r data: %s", key, error)
            return default_factory(), True

    def load_state(self, config: Configuration) -> GameState:
        seeded: list[str] = []

        def load(
            key: str, default_factory: Callable[[], T], parser: Callable[[Any], T]
        ) -> T:
            value, was_seeded = self.load_or_seed(key, default_factory, parser)
            if was_seeded:
                seeded.append(key)
            return value

        state = GameState(
            tasks=load(StateKey.TASKS, list, self.__parse_tasks),
            timer_sessions=load(StateKey.TIMERS, list, self.__parse_timer_sessions),
            coins=load(
                StateKey.COINS, lambda: config["starting_coins"], self.__parse_balance
            ),
            berries=load(
                StateKey.BERRIES,
                lambda: config["starting_berries"],
                self.__parse_balance,
            ),
            categories=load(
                StateKey.CATEGORIES, get_default_categories, self.__parse_categories
            ),
            shop_items=load(
                StateKey.SHOP_ITEMS, get_default_shop_items, self.__parse_shop_items
            ),
            achievements=load(
                StateKey.ACHIEVEMENTS,
                get_default_achievements,
                self.__parse_achievements,
            ),
            user_stats=load(
                StateKey.USER_STATS, get_user_stats_template, self.__parse_user_stats
            ),
        )
        # Seeded values are written back on the first flush
        state.mark_dirty(*seeded)
        return state

    def flush(self, state: GameState) -> bool:
        if not state.dirty_keys:
            return False
        # Each key is written on its own; no write depends on another
        for key in STATE_KEYS:
            if key in state.dirty_keys:
                payload = self.__serialize_key(state, key)
                self._store.save(
                    key, json.dumps(payload, ensure_ascii=False).encode("utf-8")
                )
        state.dirty_keys.clear()
        return True

    def __serialize_key(self, state: GameState, key: str) -> Any:
        if key == StateKey.TASKS:
            return [self.__convert_task_for_serialization(t) for t in state.tasks]
        if key == StateKey.TIMERS:
            return [
                self.__convert_timer_session_for_serialization(s)
                for s in state.timer_sessions
            ]
        if key == StateKey.COINS:
            return state.coins
        if key == StateKey.BERRIES:
            return state.berries
        if key == StateKey.CATEGORIES:
            return deepcopy(state.categories)
        if key == StateKey.SHOP_ITEMS:
            return deepcopy(state.shop_items)
        if key == StateKey.ACHIEVEMENTS:
            return deepcopy(state.achievements)
        if key == StateKey.USER_STATS:
            return self.__convert_user_stats_for_serialization(state.user_stats)
        raise KeyError(key)

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], deepcopy(task))
        serializable_task["created_at"] = time.datetime_to_iso_str(task["created_at"])
        serializable_task["completed_at"] = time.datetime_to_iso_str_optional(
            task["completed_at"]
        )
        serializable_task["deleted_at"] = time.datetime_to_iso_str_optional(
            task["deleted_at"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        if task["difficulty"] not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty {task['difficulty']!r}")
        completed = self.__require_bool(task["completed"])
        deleted = self.__require_bool(task["deleted"])
        if completed and deleted:
            raise ValueError(f"task {task['id']!r} is both completed and deleted")
        return {
            "id": str(task["id"]),
            "title": str(task["title"]),
            "category_id": str(task["category_id"]),
            "difficulty": task["difficulty"],
            "completed": completed,
            "deleted": deleted,
            "created_at": time.datetime_from_str(task["created_at"]),
            "completed_at": time.datetime_from_str_optional(task.get("completed_at")),
            "deleted_at": time.datetime_from_str_optional(task.get("deleted_at")),
        }

    def __convert_timer_session_for_serialization(
        self, session: TimerSession
    ) -> dict[str, Any]:
        serializable_session = cast(dict[str, Any], deepcopy(session))
        serializable_session["started_at"] = time.datetime_to_iso_str(
            session["started_at"]
        )
        serializable_session["completed_at"] = time.datetime_to_iso_str_optional(
            session["completed_at"]
        )
        return serializable_session

    def __convert_timer_session_for_deserialization(
        self, session: dict[str, Any]
    ) -> TimerSession:
        return {
            "id": str(session["id"]),
            "task_id": str(session["task_id"]),
            "duration_minutes": self.__require_int(session["duration_minutes"]),
            "started_at": time.datetime_from_str(session["started_at"]),
            "completed_at": time.datetime_from_str_optional(
                session.get("completed_at")
            ),
        }

    def __convert_user_stats_for_serialization(
        self, user_stats: UserStats
    ) -> dict[str, Any]:
        serializable_stats = cast(dict[str, Any], deepcopy(user_stats))
        serializable_stats["last_active_date"] = time.date_to_str_optional(
            user_stats["last_active_date"]
        )
        return serializable_stats

    def __parse_user_stats(self, raw: Any) -> UserStats:
        if not isinstance(raw, dict):
            raise TypeError("user stats must be an object")
        level = self.__require_int(raw["level"])
        if level < 1:
            raise ValueError("level must be at least 1")
        return {
            "level": level,
            "experience": self.__require_int(raw["experience"]),
            "experience_to_next_level": self.__require_int(
                raw["experience_to_next_level"]
            ),
            "streak": self.__require_int(raw["streak"]),
            "last_active_date": time.date_from_str_optional(
                raw.get("last_active_date")
            ),
        }

    def __parse_tasks(self, raw: Any) -> list[Task]:
        return [
            self.__convert_task_for_deserialization(task)
            for task in self.__require_list(raw)
        ]

    def __parse_timer_sessions(self, raw: Any) -> list[TimerSession]:
        return [
            self.__convert_timer_session_for_deserialization(session)
            for session in self.__require_list(raw)
        ]

    def __parse_balance(self, raw: Any) -> int:
        return self.__require_int(raw)

    def __parse_categories(self, raw: Any) -> list[Category]:
        return [
            {
                "id": str(category["id"]),
                "name": str(category["name"]),
                "color": str(category["color"]),
                "price": self.__require_int(category["price"]),
                "owned": self.__require_bool(category["owned"]),
                "is_custom": self.__require_bool(category.get("is_custom", False)),
            }
            for category in self.__require_list(raw)
        ]

    def __parse_shop_items(self, raw: Any) -> list[ShopItem]:
        return [
            {
                "id": str(item["id"]),
                "name": str(item["name"]),
                "description": str(item["description"]),
                "price": self.__require_int(item["price"]),
                "glyph": str(item["glyph"]),
                "is_custom": self.__require_bool(item.get("is_custom", False)),
            }
            for item in self.__require_list(raw)
        ]

    def __parse_achievements(self, raw: Any) -> list[Achievement]:
        return [
            {
                "id": str(achievement["id"]),
                "title": str(achievement["title"]),
                "description": str(achievement["description"]),
                "icon": str(achievement["icon"]),
                "is_unlocked": self.__require_bool(achievement["is_unlocked"]),
                "progress": self.__optional_int(achievement.get("progress")),
                "goal": self.__optional_int(achievement.get("goal")),
            }
            for achievement in self.__require_list(raw)
        ]

    def __require_list(self, raw: Any) -> list[Any]:
        if not isinstance(raw, list):
            raise TypeError(f"expected a list, got {type(raw).__name__}")
        return raw

    def __require_bool(self, raw: Any) -> bool:
        if not isinstance(raw, bool):
            raise TypeError(f"expected a boolean, got {raw!r}")
        return raw

    def __require_int(self, raw: Any) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"expected an integer, got {raw!r}")
        if raw < 0:
            raise ValueError(f"expected a non-negative integer, got {raw}")
        return raw

    def __optional_int(self, raw: Any) -> Optional[int]:
        if raw is None:
            return None
        return self.__require_int(raw)
