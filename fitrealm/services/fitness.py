# fitrealm/services/fitness.py
import logging
from datetime import date
from typing import List, Optional, Tuple

from ..clock import utc_today
from ..errors import NotFound
from ..models.fitness_entry import FitnessEntry
from ..repositories import characters
from ..repositories import fitness as fitness_repo
from ..rules import xp_for_activity
from ..transaction import atomic

logger = logging.getLogger(__name__)


def recent(user_id: int, limit: int = 30) -> List[FitnessEntry]:
    return fitness_repo.recent_entries(user_id, limit=limit)


def log_activity(
    user_id: int,
    calories: int = 0,
    steps: int = 0,
    exercise_minutes: int = 0,
    activity_type: Optional[str] = None,
    today: Optional[date] = None,
) -> Tuple[FitnessEntry, int]:
    """
    Record today's activity and pay xp for it.

    The day's row is created on first submission and merged into after
    that. XP is computed from the values submitted in this call, not from
    the merged row.
    """
    today = today or utc_today()
    xp_gained = xp_for_activity(calories, steps, exercise_minutes)

    with atomic():
        if characters.get_by_user(user_id) is None:
            raise NotFound("Character not found")

        entry = fitness_repo.upsert_for_day(
            user_id,
            today,
            calories=calories,
            steps=steps,
            exercise_minutes=exercise_minutes,
            activity_type=activity_type,
        )
        characters.grant(user_id, xp=xp_gained)

    logger.info(f"User {user_id} logged activity for {today.isoformat()}: +{xp_gained} xp")
    return entry, xp_gained
