# SPDX-License-Identifier: MIT

from cakecrumb.model.user_stats import UserStats

STARTING_EXPERIENCE_THRESHOLD = 100


def get_user_stats_template() -> UserStats:
    return {
        "level": 1,
        "experience": 0,
        "experience_to_next_level": STARTING_EXPERIENCE_THRESHOLD,
        "streak": 0,
        "last_active_date": None,
    }
