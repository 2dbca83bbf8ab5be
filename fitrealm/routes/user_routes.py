# fitrealm/routes/user_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import unset_jwt_cookies

from ..auth import Identity, login_required
from ..services import accounts

user_bp = Blueprint("user", __name__)


@user_bp.route("", methods=["GET"])
@login_required
def current_user(identity: Identity):
    """
    Returns:
    {
      "user": { "id": 1, "email": "...", "username": "..." },
      "character": { "name": "...", "level": 1, "xp": 0, "coins": 100, ... }
    }
    """
    user, character = accounts.profile(identity.user_id)
    return jsonify({"user": user.to_dict(), "character": character.to_dict()}), 200


@user_bp.route("", methods=["DELETE"])
@login_required
def delete_account(identity: Identity):
    accounts.delete_account(identity.user_id)

    response = jsonify({"success": True})
    unset_jwt_cookies(response)
    return response, 200
