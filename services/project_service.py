"""Project creation, board columns and project summaries."""
from __future__ import annotations

from typing import Any, Mapping

from flask import current_app
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from database import db, execute, is_unique_violation, run_transaction
from models.kanban_column import DEFAULT_COLUMNS, KanbanColumn, column_id_prefix
from models.project import Project
from models.risk import Risk
from models.sprint import Sprint
from models.task import Task
from services.entity_service import get_record
from services.errors import Conflict, InternalError
from services.identifier_service import next_identifier


def default_columns(project_id: str) -> list[KanbanColumn]:
    """Build the default board columns for a new project, in board order."""
    prefix = column_id_prefix(project_id)
    return [
        KanbanColumn(
            id=f"{prefix}{position}",
            project_id=project_id,
            name=name,
            order_index=order_index,
            is_default=True,
        )
        for position, (name, order_index) in enumerate(DEFAULT_COLUMNS, start=1)
    ]


def create_project(values: Mapping[str, Any]) -> Project:
    """Insert a project together with its default columns.

    Both inserts share one transaction: either the project and its four
    columns exist afterwards, or none of them do.
    """
    project = Project(**values)

    def insert_project(session):
        session.add(project)
        return project

    def insert_columns(session):
        session.add_all(default_columns(project.id))
        return project

    try:
        return run_transaction(insert_project, insert_columns)
    except SQLAlchemyError as exc:
        if is_unique_violation(exc):
            raise Conflict("Project with this ID already exists") from exc
        current_app.logger.error("Error creating project: %s", exc, exc_info=True)
        raise InternalError("Failed to create project", details=str(exc)) from exc


def _count(model):
    return (
        select(func.count(model.id))
        .where(model.project_id == Project.id)
        .correlate(Project)
        .scalar_subquery()
    )


def _summary_statement():
    return select(
        Project,
        _count(Sprint).label("sprint_count"),
        _count(Task).label("task_count"),
        _count(Risk).label("risk_count"),
    )


def _serialize_summary(row) -> dict[str, Any]:
    project, sprint_count, task_count, risk_count = row
    payload = project.to_dict()
    payload.update(
        {
            "sprint_count": sprint_count or 0,
            "task_count": task_count or 0,
            "risk_count": risk_count or 0,
        }
    )
    return payload


def list_project_summaries() -> list[dict[str, Any]]:
    """Return every project with its sprint, task and risk counts, newest first."""
    statement = _summary_statement().order_by(Project.created_at.desc(), Project.id.desc())
    try:
        rows = execute(statement)
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error("Error fetching projects: %s", exc, exc_info=True)
        raise InternalError("Failed to fetch projects", details=str(exc)) from exc
    return [_serialize_summary(row) for row in rows]


def get_project_summary(project_id: str) -> dict[str, Any]:
    get_record(Project, project_id, "Project")
    statement = _summary_statement().where(Project.id == project_id)
    try:
        rows = execute(statement)
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error("Error fetching project: %s", exc, exc_info=True)
        raise InternalError("Failed to fetch project", details=str(exc)) from exc
    return _serialize_summary(rows[0])


def next_column_id(project_id: str) -> str:
    prefix = column_id_prefix(project_id)
    ids = [row[0] for row in execute(select(KanbanColumn.id).where(KanbanColumn.project_id == project_id))]
    return next_identifier(prefix, ids)


def next_column_order(project_id: str) -> int:
    rows = execute(
        select(func.max(KanbanColumn.order_index)).where(KanbanColumn.project_id == project_id)
    )
    highest = rows[0][0] if rows else None
    return 0 if highest is None else highest + 1


__all__ = [
    "create_project",
    "default_columns",
    "get_project_summary",
    "list_project_summaries",
    "next_column_id",
    "next_column_order",
]
