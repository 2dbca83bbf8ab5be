# fitrealm/services/quests.py
import logging
from datetime import datetime
from typing import List, Optional

from ..clock import utcnow
from ..errors import NotFound, QuestAlreadyCompleted
from ..models.quest import Quest
from ..repositories import characters
from ..repositories import quests as quests_repo
from ..transaction import atomic

logger = logging.getLogger(__name__)


def list_quests(user_id: int) -> List[Quest]:
    return quests_repo.list_for_user(user_id)


def create(user_id: int, **fields) -> Quest:
    with atomic():
        quest = quests_repo.create_quest(user_id, **fields)
    return quest


def complete(user_id: int, quest_id: int, now: Optional[datetime] = None) -> Quest:
    """
    Mark a quest completed and pay its rewards. Completion is one-way; a
    second call is refused and pays nothing.
    """
    now = now or utcnow()

    with atomic():
        if not quests_repo.mark_completed(user_id, quest_id, now):
            if quests_repo.get_quest(user_id, quest_id) is None:
                raise NotFound("Quest not found")
            raise QuestAlreadyCompleted()

        quest = quests_repo.get_quest(user_id, quest_id)
        characters.grant(user_id, xp=quest.xp_reward, coins=quest.coin_reward, now=now)

    logger.info(
        f"User {user_id} completed quest {quest_id}: +{quest.xp_reward} xp, +{quest.coin_reward} coins"
    )
    return quest
