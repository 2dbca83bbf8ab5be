# fitrealm/transaction.py
from contextlib import contextmanager

from . import db


@contextmanager
def atomic():
    """
    Commit everything done in the block as one transaction, or roll all of
    it back and re-raise.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
