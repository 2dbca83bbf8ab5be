# fitrealm/repositories/upsert.py
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from .. import db


def conflict_ignoring_insert(model, dialect: str, **values):
    """Build the dialect's INSERT that skips rows hitting a unique constraint."""
    if dialect == "sqlite":
        return sqlite_insert(model).values(**values).on_conflict_do_nothing()
    if dialect == "postgresql":
        return pg_insert(model).values(**values).on_conflict_do_nothing()
    if dialect in ("mysql", "mariadb"):
        return mysql_insert(model).values(**values).prefix_with("IGNORE")
    raise NotImplementedError(f"insert-ignore is not supported on the '{dialect}' database")


def insert_ignoring_conflict(model, **values) -> bool:
    """
    INSERT a row unless a unique constraint already holds one.

    Used for "one row per key" tables so that two concurrent requests can
    both call this and end up sharing a single row. Returns True when this
    call inserted the row.
    """
    dialect = db.session.get_bind().dialect.name
    result = db.session.execute(conflict_ignoring_insert(model, dialect, **values))
    return bool(result.rowcount)
