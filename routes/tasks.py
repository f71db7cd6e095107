"""Task routes, including planning a task into a sprint."""
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from models.task import TASK_PRIORITY_DEFAULT, TASK_STATUS_DEFAULT, Task
from routes import json_payload, project_filter, token_required
from services.auth_service import Identity
from services.entity_service import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)
from services.errors import ValidationError
from services.sprint_service import add_task_to_sprint
from utils.payload import date_value, is_blank, require_fields, text_value

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")

LABEL = "Task"


def _task_values(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": text_value(payload, "title"),
        "description": text_value(payload, "description"),
        "status": text_value(payload, "status", TASK_STATUS_DEFAULT),
        "priority": text_value(payload, "priority", TASK_PRIORITY_DEFAULT),
        "responsible": text_value(payload, "responsible"),
        "start_date": date_value(payload, "start_date"),
        "end_date": date_value(payload, "end_date"),
        "comments": text_value(payload, "comments"),
    }


@tasks_bp.route("", methods=["GET"])
@token_required
def list_tasks(identity: Identity):
    tasks = list_records(Task, LABEL, project_id=project_filter())
    return jsonify([task.to_dict() for task in tasks])


@tasks_bp.route("/<string:task_id>", methods=["GET"])
@token_required
def get_task(task_id: str, identity: Identity):
    return jsonify(get_record(Task, task_id, LABEL).to_dict())


@tasks_bp.route("", methods=["POST"])
@token_required
def add_task(identity: Identity):
    payload = json_payload()
    require_fields(payload, ("id", "project_id", "title"))
    values = _task_values(payload)
    values["id"] = str(payload["id"]).strip()
    values["project_id"] = str(payload["project_id"]).strip()

    task = create_record(Task, values, LABEL)
    current_app.logger.info("User '%s' created task %s", identity.username, task.id)
    return jsonify({"message": "Task created successfully", "id": task.id})


@tasks_bp.route("/<string:task_id>", methods=["PUT"])
@token_required
def edit_task(task_id: str, identity: Identity):
    payload = json_payload()
    require_fields(payload, ("title",))
    update_record(Task, task_id, _task_values(payload), LABEL)
    current_app.logger.info("User '%s' updated task %s", identity.username, task_id)
    return jsonify({"message": "Task updated successfully"})


@tasks_bp.route("/<string:task_id>", methods=["DELETE"])
@token_required
def remove_task(task_id: str, identity: Identity):
    delete_record(Task, task_id, LABEL)
    current_app.logger.info("User '%s' deleted task %s", identity.username, task_id)
    return jsonify({"message": "Task deleted successfully"})


@tasks_bp.route("/<string:task_id>/sprint", methods=["POST"])
@token_required
def add_to_sprint(task_id: str, identity: Identity):
    """Plan a task into a sprint. Repeating the call is harmless."""
    payload = json_payload()
    sprint_id = payload.get("sprint_id")
    if is_blank(sprint_id):
        raise ValidationError("Sprint ID is required")

    added = add_task_to_sprint(task_id, str(sprint_id).strip())
    if added:
        current_app.logger.info(
            "User '%s' added task %s to sprint %s", identity.username, task_id, sprint_id
        )
    return jsonify({"message": "Task added to sprint successfully"})
