"""Planning tasks into sprints."""
from __future__ import annotations

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from database import db, is_unique_violation, run_transaction
from models.sprint import Sprint
from models.task import Task
from services.entity_service import get_record
from services.errors import InternalError


def add_task_to_sprint(task_id: str, sprint_id: str) -> bool:
    """Link a task to a sprint.

    Returns True when a new link was stored and False when the pair already
    existed. Missing tasks or sprints raise NotFound.
    """
    task = get_record(Task, task_id, "Task")
    sprint = get_record(Sprint, sprint_id, "Sprint")
    if task.in_sprint(sprint.id):
        return False

    def link(_session):
        task.sprints.append(sprint)
        return True

    try:
        return run_transaction(link)
    except SQLAlchemyError as exc:
        if is_unique_violation(exc):
            # Another request stored the same pair first.
            db.session.expire_all()
            return False
        current_app.logger.error("Error adding task to sprint: %s", exc, exc_info=True)
        raise InternalError("Failed to add task to sprint", details=str(exc)) from exc


__all__ = ["add_task_to_sprint"]
