# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class UserStats(TypedDict):
    level: int
    experience: int
    experience_to_next_level: int
    streak: int
    last_active_date: Optional[pendulum.Date]
