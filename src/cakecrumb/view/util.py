# SPDX-License-Identifier: MIT

from typing import Optional

from cakecrumb.model.category import Category
from cakecrumb.model.entity_id import EntityId

SHORT_ID_LENGTH = 8


def short_id(id: EntityId) -> str:
    return id[:SHORT_ID_LENGTH]


def colored(text: str, color: Optional[str]) -> str:
    if color is None or color == "":
        return text
    return f"[{color}]{text}[/{color}]"


def category_label(category_id: EntityId, categories: list[Category]) -> str:
    category = next((c for c in categories if c["id"] == category_id), None)
    if category is None:
        return "Unknown"
    return colored(category["name"], category["color"])


def progress_bar(progress: int, goal: int, width: int = 10) -> str:
    filled = min(width, (progress * width) // goal) if goal > 0 else width
    return "█" * filled + "░" * (width - filled)
