# fitrealm/repositories/users.py
from typing import Optional

from sqlalchemy import delete, or_

from .. import db
from ..models.character import Character
from ..models.user import User


def get_user(user_id: int) -> Optional[User]:
    return db.session.get(User, user_id)


def find_by_email(email: str) -> Optional[User]:
    return User.query.filter_by(email=email.lower()).first()


def find_by_username(username: str) -> Optional[User]:
    return User.query.filter_by(username=username).first()


def find_by_identifier(identifier: str) -> Optional[User]:
    """Match either an email address or a username."""
    return User.query.filter(
        or_(
            User.email == identifier.lower(),
            User.username == identifier,
        )
    ).first()


def create_user_with_character(email: str, username: str, password: str) -> User:
    user = User(email=email.lower(), username=username)
    user.set_password(password)
    db.session.add(user)
    db.session.flush()

    character = Character(user_id=user.id, name=f"{username}'s Character")
    db.session.add(character)
    db.session.flush()
    return user


def delete_user(user_id: int) -> bool:
    # owned rows go with it through ON DELETE CASCADE
    result = db.session.execute(delete(User).where(User.id == user_id))
    return result.rowcount == 1
