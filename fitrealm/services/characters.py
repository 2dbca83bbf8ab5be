# fitrealm/services/characters.py
import logging
from typing import Dict, Tuple

from ..errors import InsufficientFunds, NotFound
from ..models.character import Character
from ..repositories import characters
from ..rules import upgrade_cost
from ..transaction import atomic

logger = logging.getLogger(__name__)


def get_character(user_id: int) -> Character:
    character = characters.get_by_user(user_id)
    if not character:
        raise NotFound("Character not found")
    return character


def update_character(user_id: int, fields: Dict[str, object]) -> Character:
    """Direct overwrite of name and stats (PUT /api/character)."""
    with atomic():
        if not characters.update_profile(user_id, fields):
            raise NotFound("Character not found")
    return characters.get_by_user(user_id, refresh=True)


def upgrade(user_id: int, strength: int = 0, endurance: int = 0, agility: int = 0) -> Tuple[Character, int]:
    """
    Buy stat points at 50 coins each. Either every stat and the coin
    balance change together, or nothing changes.
    """
    cost = upgrade_cost(strength, endurance, agility)

    with atomic():
        paid = characters.spend_on_stats(user_id, strength, endurance, agility, cost)
        if not paid:
            character = characters.get_by_user(user_id, refresh=True)
            if not character:
                raise NotFound("Character not found")
            raise InsufficientFunds(
                f"Upgrade costs {cost} coins, you have {character.coins}"
            )

    logger.info(
        f"User {user_id} upgraded str+{strength} end+{endurance} agi+{agility} for {cost} coins"
    )
    return characters.get_by_user(user_id, refresh=True), cost
