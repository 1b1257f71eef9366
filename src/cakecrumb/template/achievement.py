# SPDX-License-Identifier: MIT

from cakecrumb.model.achievement import Achievement, AchievementId


def get_default_achievements() -> list[Achievement]:
    return [
        {
            "id": AchievementId.FIRST_TASK,
            "title": "First Bite",
            "description": "Complete your first task",
            "icon": "🍰",
            "is_unlocked": False,
            "progress": None,
            "goal": None,
        },
        {
            "id": AchievementId.FIRST_TIMER,
            "title": "Oven Timer",
            "description": "Complete your first focus timer",
            "icon": "⏲",
            "is_unlocked": False,
            "progress": None,
            "goal": None,
        },
        {
            "id": AchievementId.TASKS_5,
            "title": "Baker's Dozen Begins",
            "description": "Complete 5 tasks",
            "icon": "🧁",
            "is_unlocked": False,
            "progress": 0,
            "goal": 5,
        },
        {
            "id": AchievementId.TASKS_10,
            "title": "Master Baker",
            "description": "Complete 10 tasks",
            "icon": "🎂",
            "is_unlocked": False,
            "progress": 0,
            "goal": 10,
        },
        {
            "id": AchievementId.STREAK_3,
            "title": "Warming Up",
            "description": "Keep a 3 day streak",
            "icon": "🔥",
            "is_unlocked": False,
            "progress": 0,
            "goal": 3,
        },
        {
            "id": AchievementId.STREAK_7,
            "title": "Week of Treats",
            "description": "Keep a 7 day streak",
            "icon": "🏆",
            "is_unlocked": False,
            "progress": 0,
            "goal": 7,
        },
        {
            "id": AchievementId.COLLECTOR,
            "title": "Flavor Collector",
            "description": "Own 5 cake flavors",
            "icon": "🎨",
            "is_unlocked": False,
            # The default flavor is owned from the start
            "progress": 1,
            "goal": 5,
        },
    ]
