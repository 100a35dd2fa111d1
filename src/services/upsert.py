"""Dialect-aware INSERT ... ON CONFLICT statements."""

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session


def upsert_insert(db: Session, model: Any):
    """Return an insert() for ``model`` that supports on_conflict_do_*.

    PostgreSQL and SQLite both implement ON CONFLICT, which makes each
    upsert a single atomic statement.
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise RuntimeError(f"Upserts are not supported on {dialect}")
