# SPDX-License-Identifier: MIT

import logging
import math
from typing import Optional

import pendulum

from cakecrumb.errors import ValidationError
from cakecrumb.model.achievement import AchievementId
from cakecrumb.model.entity_id import EntityId
from cakecrumb.model.game_state import GameState, StateKey
from cakecrumb.model.timer_session import TimerSession
from cakecrumb.service import achievement, economy, progression
from cakecrumb.template.timer_session import get_timer_session_template

logger = logging.getLogger(__name__)

REWARD_INCREMENT_MINUTES = 5
TIMER_EXPERIENCE_PER_MINUTE = 1


def rounded_duration(duration_minutes: int) -> int:
    """Round up to the next multiple of five minutes: 7 -> 10, 16 -> 20."""
    return (
        math.ceil(duration_minutes / REWARD_INCREMENT_MINUTES)
        * REWARD_INCREMENT_MINUTES
    )


def start_timer(
    state: GameState,
    task_id: EntityId,
    duration_minutes: int,
    now: pendulum.DateTime,
    min_minutes: int,
    max_minutes: int,
) -> TimerSession:
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
        raise ValidationError(
            "duration_minutes", f"must be a whole number, got {duration_minutes!r}"
        )
    if duration_minutes <= 0:
        raise ValidationError(
            "duration_minutes", f"must be positive, got {duration_minutes}"
        )
    if not (min_minutes <= duration_minutes <= max_minutes):
        raise ValidationError(
            "duration_minutes",
            f"must be between {min_minutes} and {max_minutes}, got {duration_minutes}",
        )

    # The task is not checked: a session may outlive its task
    session = get_timer_session_template(task_id, duration_minutes, now)
    state.timer_sessions.append(session)
    state.mark_dirty(StateKey.TIMERS)
    logger.debug("Started %d minute timer %s", duration_minutes, session["id"])
    return session


def complete_timer(
    state: GameState,
    id: EntityId,
    now: pendulum.DateTime,
    multi_level_up: bool = False,
) -> Optional[TimerSession]:
    session = state.find_timer_session(id)
    if session is None or session["completed_at"] is not None:
        return None

    session["completed_at"] = now
    state.mark_dirty(StateKey.TIMERS)

    minutes = rounded_duration(session["duration_minutes"])
    economy.add_berries(state, minutes)
    progression.gain_experience(
        state, minutes * TIMER_EXPERIENCE_PER_MINUTE, multi_level_up
    )
    achievement.unlock_achievement(state, AchievementId.FIRST_TIMER, multi_level_up)

    logger.debug("Completed timer %s", session["id"])
    return session
