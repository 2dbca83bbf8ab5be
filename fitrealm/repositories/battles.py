# fitrealm/repositories/battles.py
from typing import List

from .. import db
from ..models.battle import Battle
from ..rules import BattleOutcome


def recent_battles(user_id: int, limit: int = 10) -> List[Battle]:
    return (
        Battle.query.filter_by(user_id=user_id)
        .order_by(Battle.created_at.desc(), Battle.id.desc())
        .limit(limit)
        .all()
    )


def record_battle(user_id: int, enemy_type: str, player_action: str, outcome: BattleOutcome) -> Battle:
    battle = Battle(
        user_id=user_id,
        enemy_type=enemy_type,
        player_action=player_action,
        victory=outcome.victory,
        xp_gained=outcome.xp_gained,
        coins_gained=outcome.coins_gained,
    )
    db.session.add(battle)
    db.session.flush()
    return battle
