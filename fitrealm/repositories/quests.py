# fitrealm/repositories/quests.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update

from .. import db
from ..models.quest import Quest


def list_for_user(user_id: int) -> List[Quest]:
    return (
        Quest.query.filter_by(user_id=user_id)
        .order_by(Quest.created_at.desc(), Quest.id.desc())
        .all()
    )


def open_quests(user_id: int, limit: int = 5) -> List[Quest]:
    return (
        Quest.query.filter(Quest.user_id == user_id, Quest.completed.is_(False))
        .order_by(Quest.created_at.desc(), Quest.id.desc())
        .limit(limit)
        .all()
    )


def get_quest(user_id: int, quest_id: int) -> Optional[Quest]:
    stmt = (
        select(Quest)
        .where(Quest.id == quest_id, Quest.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    return db.session.execute(stmt).scalar_one_or_none()


def create_quest(user_id: int, **fields) -> Quest:
    quest = Quest(user_id=user_id, **fields)
    db.session.add(quest)
    db.session.flush()
    return quest


def mark_completed(user_id: int, quest_id: int, now: datetime) -> bool:
    """
    Flip completed false -> true. Returns True only for the call that made
    the transition, so rewards tied to it are paid once.
    """
    result = db.session.execute(
        update(Quest)
        .where(
            Quest.id == quest_id,
            Quest.user_id == user_id,
            Quest.completed.is_(False),
        )
        .values(completed=True, completed_at=now, updated_at=now)
    )
    return result.rowcount == 1
