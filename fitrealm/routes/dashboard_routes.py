# fitrealm/routes/dashboard_routes.py
from flask import Blueprint, jsonify

from ..auth import Identity, login_required
from ..clock import utc_today
from ..presentation import dashboard
from ..repositories import quests as quests_repo
from ..services import accounts, battles, rewards

dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("", methods=["GET"])
@login_required
def get_dashboard(identity: Identity):
    """
    Everything the main screen needs in one call:
    {
      "user": {...},
      "character": {...},
      "progress": { "level": 2, "xpIntoLevel": 140, "xpPerLevel": 1000, "xpToNextLevel": 860 },
      "recentBattles": [...],
      "openQuests": [...],
      "dailyRewardClaimed": false
    }
    """
    user, character = accounts.profile(identity.user_id)

    return (
        jsonify(
            dashboard(
                user,
                character,
                battles=battles.recent(identity.user_id, limit=5),
                quests=quests_repo.open_quests(identity.user_id),
                daily_claimed=rewards.already_claimed(identity.user_id, utc_today()),
            )
        ),
        200,
    )
