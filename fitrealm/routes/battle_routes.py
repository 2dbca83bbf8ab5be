# fitrealm/routes/battle_routes.py
from flask import Blueprint, current_app, jsonify

from ..auth import Identity, login_required
from ..presentation import battle_rewards
from ..services import battles
from ..validation import json_body, required_text

battles_bp = Blueprint("battles", __name__)

HISTORY_LIMIT = 10


@battles_bp.route("", methods=["GET"])
@login_required
def list_battles(identity: Identity):
    rows = battles.recent(identity.user_id, limit=HISTORY_LIMIT)
    return jsonify([b.to_dict() for b in rows]), 200


@battles_bp.route("", methods=["POST"])
@login_required
def start_battle(identity: Identity):
    """
    Body: { "enemyType": "Sloth Dragon", "playerAction": "attack" }

    Returns the stored battle plus both power values and the rewards paid.
    """
    data = json_body()

    battle, outcome = battles.fight(
        identity.user_id,
        enemy_type=required_text(data, "enemyType", max_length=100),
        player_action=required_text(data, "playerAction", max_length=100),
        rng=current_app.config.get("BATTLE_RNG"),
    )

    payload = battle.to_dict()
    payload["playerPower"] = outcome.player_power
    payload["enemyPower"] = outcome.enemy_power
    payload["rewards"] = battle_rewards(outcome)
    return jsonify(payload), 200
