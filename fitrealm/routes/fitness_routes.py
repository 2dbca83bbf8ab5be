# fitrealm/routes/fitness_routes.py
from flask import Blueprint, jsonify

from ..auth import Identity, login_required
from ..presentation import activity_rewards
from ..services import fitness
from ..validation import json_body, non_negative_int, optional_text

fitness_bp = Blueprint("fitness", __name__)

HISTORY_LIMIT = 30


@fitness_bp.route("", methods=["GET"])
@login_required
def list_entries(identity: Identity):
    entries = fitness.recent(identity.user_id, limit=HISTORY_LIMIT)
    return jsonify([e.to_dict() for e in entries]), 200


@fitness_bp.route("", methods=["POST"])
@login_required
def log_activity(identity: Identity):
    """
    Expected body (all optional, default 0 / "general"):
    {
      "calories": 300,
      "steps": 5000,
      "exerciseMinutes": 30,
      "activityType": "cardio"
    }

    Returns the day's entry plus the xp this submission earned:
    { ...entry..., "xpGained": 140, "rewards": [...] }
    """
    data = json_body()

    entry, xp_gained = fitness.log_activity(
        identity.user_id,
        calories=non_negative_int(data, "calories"),
        steps=non_negative_int(data, "steps"),
        exercise_minutes=non_negative_int(data, "exerciseMinutes"),
        activity_type=optional_text(data, "activityType", max_length=50),
    )

    payload = entry.to_dict()
    payload["xpGained"] = xp_gained
    payload["rewards"] = activity_rewards(xp_gained)
    return jsonify(payload), 200
