# fitrealm/services/battles.py
import logging
import random
from typing import List, Optional, Tuple

from ..errors import NotFound
from ..models.battle import Battle
from ..repositories import battles as battles_repo
from ..repositories import characters
from ..rules import BattleOutcome, resolve_battle
from ..transaction import atomic

logger = logging.getLogger(__name__)


def recent(user_id: int, limit: int = 10) -> List[Battle]:
    return battles_repo.recent_battles(user_id, limit=limit)


def fight(
    user_id: int,
    enemy_type: str,
    player_action: str,
    rng: Optional[random.Random] = None,
) -> Tuple[Battle, BattleOutcome]:
    """
    Resolve one encounter, store it and pay out.

    player_action is kept on the record only; it has no effect on the odds.
    """
    with atomic():
        character = characters.get_by_user(user_id)
        if not character:
            raise NotFound("Character not found")

        outcome = resolve_battle(character.strength, character.agility, rng)
        battle = battles_repo.record_battle(user_id, enemy_type, player_action, outcome)
        characters.grant(user_id, xp=outcome.xp_gained, coins=outcome.coins_gained)

    logger.info(
        f"User {user_id} fought {enemy_type}: power {outcome.player_power} vs "
        f"{outcome.enemy_power}, {'victory' if outcome.victory else 'defeat'}"
    )
    return battle, outcome
