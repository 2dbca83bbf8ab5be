# fitrealm/routes/leaderboard_routes.py
from flask import Blueprint, jsonify, request

from ..services import leaderboard

leaderboard_bp = Blueprint("leaderboard", __name__)


@leaderboard_bp.route("", methods=["GET"])
def get_leaderboard():
    """
    Public. ?period=all (default) | weekly | monthly

    Returns up to 100 rows:
    [ { "rank": 1, "username": "alice", "name": "...", "level": 6, "xp": 5100 }, ... ]
    """
    period = request.args.get("period", "all")
    return jsonify(leaderboard.ranking(period)), 200
