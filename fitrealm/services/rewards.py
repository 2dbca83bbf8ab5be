# fitrealm/services/rewards.py
"""
Daily reward ledger.

A claim is the pair (daily_reward achievement row, xp/coin grant) written
in one transaction. The achievement row is the idempotence marker; the
unique constraint on (user_id, type, claim_date) makes a concurrent second
claim fail at insert time, which rolls back its grant as well.

Days are UTC calendar dates.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from ..clock import utcnow
from ..errors import AlreadyClaimed, NotFound
from ..models.achievement import Achievement
from ..repositories import achievements, characters
from ..rules import DAILY_REWARD_COINS, DAILY_REWARD_XP
from ..transaction import atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyReward:
    xp: int
    coins: int
    claimed_on: date


def already_claimed(user_id: int, today: date) -> bool:
    return achievements.find_daily_claim(user_id, today) is not None


def claim_daily(user_id: int, now: Optional[datetime] = None) -> DailyReward:
    now = now or utcnow()
    today = now.date()

    if already_claimed(user_id, today):
        raise AlreadyClaimed()

    try:
        with atomic():
            if characters.get_by_user(user_id) is None:
                raise NotFound("Character not found")
            achievements.record_daily_claim(user_id, today, now)
            characters.grant(user_id, xp=DAILY_REWARD_XP, coins=DAILY_REWARD_COINS, now=now)
    except IntegrityError:
        logger.info(f"Concurrent daily claim refused for user {user_id} on {today.isoformat()}")
        raise AlreadyClaimed()

    logger.info(f"User {user_id} claimed daily reward for {today.isoformat()}")
    return DailyReward(xp=DAILY_REWARD_XP, coins=DAILY_REWARD_COINS, claimed_on=today)


def trophy_case(user_id: int) -> List[Achievement]:
    return achievements.list_for_user(user_id)
