"""Human-readable identifier allocation (P1, T2, S3, ...).

Allocation reads the ids already stored and returns the next free sequence
number. Nothing is reserved: two concurrent callers can receive the same id,
in which case the later insert is rejected as a conflict and the caller has to
ask for a fresh id.
"""
from __future__ import annotations

import re
from typing import Iterable

from sqlalchemy import select

from database import execute
from models.minutes import Minutes
from models.project import Project
from models.risk import Risk
from models.sprint import Sprint
from models.task import Task
from services.errors import InvalidPrefix

PREFIX_MODELS = {
    "P": Project,
    "T": Task,
    "S": Sprint,
    "R": Risk,
    "M": Minutes,
}


def next_identifier(prefix: str, existing_ids: Iterable[str | None]) -> str:
    """Return ``prefix`` followed by one more than the highest numeric suffix.

    Ids that are not exactly ``prefix`` + digits are ignored.
    """
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    highest = 0
    for value in existing_ids:
        if not value:
            continue
        match = pattern.match(value)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{prefix}{highest + 1}"


def existing_ids(model, project_id: str | None = None) -> list[str]:
    statement = select(model.id)
    if project_id and hasattr(model, "project_id"):
        statement = statement.where(model.project_id == project_id)
    return [row[0] for row in execute(statement)]


def next_id(prefix: str, project_id: str | None = None) -> str:
    """Compute the next id for the entity type identified by ``prefix``.

    ``project_id`` narrows the scan to one project; it is ignored for
    projects themselves.
    """
    model = PREFIX_MODELS.get(prefix)
    if model is None:
        raise InvalidPrefix("Invalid prefix", message=f"Unknown id prefix '{prefix}'")
    return next_identifier(prefix, existing_ids(model, project_id))


__all__ = ["PREFIX_MODELS", "existing_ids", "next_id", "next_identifier"]
