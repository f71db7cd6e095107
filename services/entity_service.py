"""Storage operations shared by every entity blueprint.

Each helper runs one statement (or one short transaction) and translates
storage failures: unique violations become ``Conflict`` and any other
``SQLAlchemyError`` is logged and reported as ``InternalError`` with the
driver message attached.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from database import db, execute, is_unique_violation, run_transaction
from services.errors import Conflict, InternalError, NotFound


def _storage_error(action: str, label: str, exc: SQLAlchemyError) -> InternalError:
    current_app.logger.error("Error %s %s: %s", action, label.lower(), exc, exc_info=True)
    verb = {"fetching": "fetch", "creating": "create", "updating": "update", "deleting": "delete"}
    return InternalError(f"Failed to {verb.get(action, action)} {label.lower()}", details=str(exc))


def list_records(model, label: str, project_id: str | None = None, order_by=None) -> list:
    """Return all rows of ``model``, optionally for a single project.

    Rows come newest first unless ``order_by`` is supplied.
    """
    statement = select(model)
    if project_id and hasattr(model, "project_id"):
        statement = statement.where(model.project_id == project_id)
    if order_by is None:
        order_by = (model.created_at.desc(), model.id.desc())
    statement = statement.order_by(*order_by)
    try:
        return [row[0] for row in execute(statement)]
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise _storage_error("fetching", label, exc) from exc


def get_record(model, record_id: str, label: str):
    """Return the row with ``record_id`` or raise NotFound."""
    try:
        record = db.session.get(model, record_id)
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise _storage_error("fetching", label, exc) from exc
    if record is None:
        raise NotFound(f"{label} not found")
    return record


def create_record(model, values: Mapping[str, Any], label: str):
    record = model(**values)

    def insert(session):
        session.add(record)
        return record

    try:
        return run_transaction(insert)
    except SQLAlchemyError as exc:
        if is_unique_violation(exc):
            raise Conflict(f"{label} with this ID already exists") from exc
        raise _storage_error("creating", label, exc) from exc


def update_record(model, record_id: str, values: Mapping[str, Any], label: str):
    """Overwrite the mutable fields of an existing row."""
    record = get_record(model, record_id, label)

    def apply(_session):
        for field, value in values.items():
            setattr(record, field, value)
        if hasattr(record, "updated_at"):
            record.updated_at = datetime.utcnow()
        return record

    try:
        return run_transaction(apply)
    except SQLAlchemyError as exc:
        raise _storage_error("updating", label, exc) from exc


def delete_record(model, record_id: str, label: str) -> None:
    record = get_record(model, record_id, label)
    try:
        run_transaction(lambda session: session.delete(record))
    except SQLAlchemyError as exc:
        raise _storage_error("deleting", label, exc) from exc


__all__ = [
    "create_record",
    "delete_record",
    "get_record",
    "list_records",
    "update_record",
]
