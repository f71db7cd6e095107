"""Database handle shared by models, services and the app factory.

The ``db`` extension owns the engine and its connection pool. It is bound to
the application in ``create_app`` and every request works on its own scoped
session, which Flask-SQLAlchemy removes when the app context is torn down.
"""
from __future__ import annotations

import sqlite3
from typing import Any, Callable

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import CursorResult, Engine
from sqlalchemy.exc import IntegrityError

db = SQLAlchemy()

PG_UNIQUE_VIOLATION = "23505"


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless asked per connection.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def execute(statement, params: dict[str, Any] | None = None) -> list:
    """Run a single statement and return its rows (empty for DML)."""
    result = db.session.execute(statement, params or {})
    # ORM selects come back as iterator results; only cursor results can be row-less.
    if isinstance(result, CursorResult) and not result.returns_rows:
        return []
    return list(result.all())


def run_transaction(*steps: Callable):
    """Run ``steps`` inside one transaction and return the last step's result.

    Each step receives the session and is flushed before the next one starts,
    so statements reach the database in order. Any failure rolls back every
    step executed so far and the original exception is re-raised.
    """
    session = db.session
    result = None
    try:
        for step in steps:
            result = step(session)
            session.flush()
        session.commit()
    except Exception:
        session.rollback()
        raise
    return result


def is_unique_violation(exc: Exception) -> bool:
    """True when ``exc`` reports a primary-key or unique constraint violation."""
    if not isinstance(exc, IntegrityError):
        return False
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    sqlstate = getattr(getattr(orig, "diag", None), "sqlstate", None)
    if sqlstate == PG_UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


__all__ = ["db", "execute", "is_unique_violation", "run_transaction"]
