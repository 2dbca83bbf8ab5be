# fitrealm/repositories/characters.py
"""
Character data access.

Every mutation that adds to or subtracts from a counter is a single
UPDATE evaluated by the database (`xp = xp + :n`), never a read followed
by a write of a value computed in Python. That keeps concurrent requests
on the same character from losing each other's changes.
"""
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import select, update

from .. import db
from ..clock import utcnow
from ..models.character import Character
from ..rules import XP_PER_LEVEL


def get_by_user(user_id: int, refresh: bool = False) -> Optional[Character]:
    stmt = select(Character).where(Character.user_id == user_id)
    if refresh:
        stmt = stmt.execution_options(populate_existing=True)
    return db.session.execute(stmt).scalar_one_or_none()


def recompute_level(user_id: int) -> None:
    """level = floor(xp / 1000) + 1, from whatever xp is stored now."""
    db.session.execute(
        update(Character)
        .where(Character.user_id == user_id)
        .values(level=Character.xp // XP_PER_LEVEL + 1)
    )


def grant(user_id: int, xp: int = 0, coins: int = 0, now: Optional[datetime] = None) -> bool:
    """
    Add xp and coins to the user's character and bring its level in line.
    Returns False when the user has no character.
    """
    result = db.session.execute(
        update(Character)
        .where(Character.user_id == user_id)
        .values(
            xp=Character.xp + xp,
            coins=Character.coins + coins,
            updated_at=now or utcnow(),
        )
    )
    if result.rowcount == 0:
        return False

    if xp:
        recompute_level(user_id)
    return True


def spend_on_stats(
    user_id: int,
    strength: int,
    endurance: int,
    agility: int,
    cost: int,
    now: Optional[datetime] = None,
) -> bool:
    """
    Raise stats and deduct cost in one statement, guarded by coins >= cost.
    Returns False (and changes nothing) when the character can't afford it.
    """
    result = db.session.execute(
        update(Character)
        .where(Character.user_id == user_id, Character.coins >= cost)
        .values(
            strength=Character.strength + strength,
            endurance=Character.endurance + endurance,
            agility=Character.agility + agility,
            coins=Character.coins - cost,
            updated_at=now or utcnow(),
        )
    )
    return result.rowcount == 1


def update_profile(user_id: int, fields: Dict[str, object], now: Optional[datetime] = None) -> bool:
    """Overwrite name and/or stats. Only the keys present in fields change."""
    allowed = {"name", "strength", "endurance", "agility"}
    values = {k: v for k, v in fields.items() if k in allowed}
    values["updated_at"] = now or utcnow()

    result = db.session.execute(
        update(Character).where(Character.user_id == user_id).values(**values)
    )
    return result.rowcount == 1
