# fitrealm/routes/quest_routes.py
from flask import Blueprint, jsonify

from ..auth import Identity, login_required
from ..errors import InvalidRequest
from ..models.quest import QUEST_TYPES
from ..presentation import quest_rewards
from ..services import quests
from ..validation import json_body, non_negative_int, optional_text, positive_int, required_text

quests_bp = Blueprint("quests", __name__)


@quests_bp.route("", methods=["GET"])
@login_required
def list_quests(identity: Identity):
    return jsonify([q.to_dict() for q in quests.list_quests(identity.user_id)]), 200


@quests_bp.route("", methods=["POST"])
@login_required
def create_quest(identity: Identity):
    """
    Body:
    {
      "title": "Walk 10k steps",
      "description": "Every step counts",
      "type": "daily" | "weekly" | "achievement",
      "target": 10000,
      "xpReward": 50,      # optional
      "coinReward": 25     # optional
    }
    """
    data = json_body()

    quest_type = data.get("type")
    if quest_type not in QUEST_TYPES:
        raise InvalidRequest(f"type must be one of: {', '.join(QUEST_TYPES)}")

    target = positive_int(data, "target")
    if target is None:
        raise InvalidRequest("target is required")

    quest = quests.create(
        identity.user_id,
        title=required_text(data, "title", max_length=100),
        description=optional_text(data, "description") or "",
        type=quest_type,
        target=target,
        progress=non_negative_int(data, "progress"),
        xp_reward=non_negative_int(data, "xpReward", default=50),
        coin_reward=non_negative_int(data, "coinReward", default=25),
    )
    return jsonify(quest.to_dict()), 201


@quests_bp.route("/<int:quest_id>/complete", methods=["POST"])
@login_required
def complete_quest(identity: Identity, quest_id: int):
    quest = quests.complete(identity.user_id, quest_id)

    payload = quest.to_dict()
    payload["rewards"] = quest_rewards(quest)
    return jsonify(payload), 200
