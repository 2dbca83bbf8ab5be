# fitrealm/repositories/fitness.py
from datetime import date
from typing import List, Optional

from sqlalchemy import select

from .. import db
from ..clock import utcnow
from ..models.fitness_entry import FitnessEntry
from .upsert import insert_ignoring_conflict

MERGED_FIELDS = ("calories", "steps", "exercise_minutes", "activity_type")


def recent_entries(user_id: int, limit: int = 30) -> List[FitnessEntry]:
    return (
        FitnessEntry.query.filter_by(user_id=user_id)
        .order_by(FitnessEntry.entry_date.desc())
        .limit(limit)
        .all()
    )


def get_for_day(user_id: int, day: date) -> Optional[FitnessEntry]:
    stmt = (
        select(FitnessEntry)
        .where(FitnessEntry.user_id == user_id, FitnessEntry.entry_date == day)
        .execution_options(populate_existing=True)
    )
    return db.session.execute(stmt).scalar_one_or_none()


def upsert_for_day(user_id: int, day: date, **fields) -> FitnessEntry:
    """
    Merge a submission into the user's row for `day`, creating it first if
    needed. A falsy value (0, "", None) keeps what is already stored.
    """
    insert_ignoring_conflict(
        FitnessEntry,
        user_id=user_id,
        entry_date=day,
        calories=0,
        steps=0,
        exercise_minutes=0,
        activity_type="general",
    )

    entry = get_for_day(user_id, day)
    for name in MERGED_FIELDS:
        value = fields.get(name)
        if value:
            setattr(entry, name, value)
    entry.updated_at = utcnow()

    db.session.flush()
    return entry
