# fitrealm/repositories/achievements.py
from datetime import date, datetime
from typing import List, Optional

from .. import db
from ..models.achievement import Achievement, DAILY_REWARD_TYPE


def list_for_user(user_id: int, limit: int = 50) -> List[Achievement]:
    return (
        Achievement.query.filter_by(user_id=user_id)
        .order_by(Achievement.unlocked_at.desc(), Achievement.id.desc())
        .limit(limit)
        .all()
    )


def find_daily_claim(user_id: int, day: date) -> Optional[Achievement]:
    return Achievement.query.filter_by(
        user_id=user_id,
        type=DAILY_REWARD_TYPE,
        claim_date=day,
    ).first()


def record_daily_claim(user_id: int, day: date, now: datetime) -> Achievement:
    """Append the claim marker. A second row for the same day violates
    uq_achievements_user_type_day at flush time."""
    claim = Achievement(
        user_id=user_id,
        title="Daily Login",
        description="Claimed daily login reward",
        type=DAILY_REWARD_TYPE,
        unlocked_at=now,
        claim_date=day,
    )
    db.session.add(claim)
    db.session.flush()
    return claim
