# fitrealm/services/accounts.py
import logging
from typing import Tuple

from sqlalchemy.exc import IntegrityError

from ..errors import InvalidRequest, NotFound, Unauthenticated
from ..models.character import Character
from ..models.user import User
from ..repositories import characters, users
from ..transaction import atomic

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def register(email: str, username: str, password: str) -> User:
    """Create a local account together with its starter character."""
    email = (email or "").strip().lower()
    username = (username or "").strip()

    if not email or not username or not password:
        raise InvalidRequest("email, username and password are required")
    if "@" not in email:
        raise InvalidRequest("email is not valid")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidRequest(f"password must be at least {MIN_PASSWORD_LENGTH} characters")

    if users.find_by_email(email):
        raise InvalidRequest("email already in use")
    if users.find_by_username(username):
        raise InvalidRequest("username already in use")

    try:
        with atomic():
            user = users.create_user_with_character(email, username, password)
    except IntegrityError:
        # lost a race with a simultaneous registration
        raise InvalidRequest("email or username already in use")

    logger.info(f"Registered user {user.id} ({username})")
    return user


def authenticate(identifier: str, password: str) -> User:
    identifier = (identifier or "").strip()
    if not identifier or not password:
        raise InvalidRequest("identifier and password are required")

    user = users.find_by_identifier(identifier)
    if not user or not user.check_password(password):
        raise Unauthenticated("invalid credentials")
    return user


def profile(user_id: int) -> Tuple[User, Character]:
    user = users.get_user(user_id)
    if not user:
        raise NotFound("User not found")
    character = characters.get_by_user(user_id)
    if not character:
        raise NotFound("Character not found")
    return user, character


def delete_account(user_id: int) -> None:
    with atomic():
        if not users.delete_user(user_id):
            raise NotFound("User not found")
    logger.info(f"Deleted user {user_id} and all owned records")
