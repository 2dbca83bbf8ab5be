# fitrealm/routes/rewards_routes.py
from flask import Blueprint, jsonify

from ..auth import Identity, login_required
from ..presentation import daily_rewards
from ..services import rewards

rewards_bp = Blueprint("rewards", __name__)


@rewards_bp.route("/rewards/daily", methods=["POST"])
@login_required
def claim_daily_reward(identity: Identity):
    """
    Once per UTC calendar day.

    Returns:
    {
      "xpReward": 100,
      "coinReward": 50,
      "rewards": [
        { "type": "xp", "amount": 100, "name": "Daily Login XP" },
        { "type": "coins", "amount": 50, "name": "Daily Login Bonus" }
      ]
    }
    A second claim on the same day fails with 400 AlreadyClaimed.
    """
    granted = rewards.claim_daily(identity.user_id)
    return (
        jsonify(
            {
                "xpReward": granted.xp,
                "coinReward": granted.coins,
                "rewards": daily_rewards(granted),
            }
        ),
        200,
    )


@rewards_bp.route("/achievements", methods=["GET"])
@login_required
def list_achievements(identity: Identity):
    rows = rewards.trophy_case(identity.user_id)
    return jsonify({"achievements": [a.to_dict() for a in rows]}), 200
