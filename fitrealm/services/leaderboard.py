# fitrealm/services/leaderboard.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from .. import db
from ..clock import utcnow
from ..models.character import Character
from ..models.user import User
from ..rules import LEADERBOARD_LIMIT, leaderboard_cutoff


def ranking(period: str = "all", now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    Top characters by level, then xp. "weekly" and "monthly" keep only
    characters whose row changed within the last 7 / 30 days.
    """
    cutoff = leaderboard_cutoff(period, now or utcnow())

    query = db.session.query(Character, User).join(User, Character.user_id == User.id)
    if cutoff is not None:
        query = query.filter(Character.updated_at >= cutoff)

    rows = (
        query.order_by(Character.level.desc(), Character.xp.desc(), Character.id.asc())
        .limit(LEADERBOARD_LIMIT)
        .all()
    )

    return [
        {
            "rank": position,
            "id": character.id,
            "name": character.name,
            "username": user.username,
            "level": character.level,
            "xp": character.xp,
        }
        for position, (character, user) in enumerate(rows, start=1)
    ]
