# fitrealm/auth.py
from dataclasses import dataclass
from functools import wraps

from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from .errors import Unauthenticated


@dataclass(frozen=True)
class Identity:
    """The authenticated caller of one request."""

    user_id: int


def login_required(fn):
    """
    Require a valid session and hand the caller's Identity to the view
    as its first positional argument.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        raw = get_jwt_identity()
        try:
            identity = Identity(user_id=int(raw))
        except (TypeError, ValueError):
            raise Unauthenticated("Invalid session")
        return fn(identity, *args, **kwargs)

    return wrapper
