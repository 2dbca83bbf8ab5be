# fitrealm/routes/auth_routes.py

from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies

from ..errors import Unauthenticated
from ..services import accounts
from ..validation import json_body

auth_bp = Blueprint("auth", __name__)


def _session_response(user, status: int):
    access_token = create_access_token(identity=str(user.id))
    response = jsonify({"token": access_token, "user": user.to_dict()})
    set_access_cookies(response, access_token)
    return response, status


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()

    user = accounts.register(
        email=data.get("email") or "",
        username=data.get("username") or "",
        password=data.get("password") or "",  # do NOT strip passwords
    )
    return _session_response(user, 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    """
    Accepts:
      - { "email": "...", "password": "..." }
      - { "username": "...", "password": "..." }
      - { "identifier": "...", "password": "..." }  # email or username
    """
    data = json_body()

    identifier = (data.get("identifier") or data.get("email") or data.get("username") or "").strip()
    password = data.get("password") or ""

    current_app.logger.info(f"[auth/login] identifier='{identifier}' keys={list(data.keys())}")

    try:
        user = accounts.authenticate(identifier, password)
    except Unauthenticated:
        current_app.logger.info(f"[auth/login] rejected identifier='{identifier}'")
        raise

    return _session_response(user, 200)


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"success": True})
    unset_jwt_cookies(response)
    return response, 200
