# fitrealm/routes/character_routes.py
from flask import Blueprint, jsonify

from ..auth import Identity, login_required
from ..errors import InvalidRequest
from ..services import characters
from ..validation import json_body, non_negative_int, optional_text

character_bp = Blueprint("character", __name__)

STAT_FIELDS = ("strength", "endurance", "agility")


@character_bp.route("", methods=["GET"])
@login_required
def get_character(identity: Identity):
    character = characters.get_character(identity.user_id)
    return jsonify(character.to_dict()), 200


@character_bp.route("", methods=["PUT"])
@login_required
def update_character(identity: Identity):
    """
    Body (any subset):
    { "name": "Sir Sweats-a-lot", "strength": 12, "endurance": 10, "agility": 11 }
    """
    data = json_body()

    fields = {}
    if "name" in data:
        name = optional_text(data, "name", max_length=100)
        if not name:
            raise InvalidRequest("name must not be empty")
        fields["name"] = name

    for stat in STAT_FIELDS:
        if stat in data:
            value = non_negative_int(data, stat, default=None)
            if value is None:
                raise InvalidRequest(f"{stat} must be a non-negative integer")
            fields[stat] = value

    if not fields:
        raise InvalidRequest("nothing to update")

    character = characters.update_character(identity.user_id, fields)
    return jsonify(character.to_dict()), 200


@character_bp.route("/upgrade", methods=["POST"])
@login_required
def upgrade_character(identity: Identity):
    """
    Spend coins on stat points (50 coins per point).

    Body: { "strength": 1, "endurance": 0, "agility": 2 }
    """
    data = json_body()
    deltas = {stat: non_negative_int(data, stat) for stat in STAT_FIELDS}

    character, cost = characters.upgrade(identity.user_id, **deltas)

    payload = character.to_dict()
    payload["upgradeCost"] = cost
    return jsonify(payload), 200
