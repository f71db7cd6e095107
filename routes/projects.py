"""Project routes."""
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from models.project import PROJECT_STATUS_DEFAULT, Project
from routes import json_payload, token_required
from services.auth_service import Identity
from services.entity_service import delete_record, update_record
from services.project_service import create_project, get_project_summary, list_project_summaries
from utils.payload import require_fields, text_value

projects_bp = Blueprint("projects", __name__, url_prefix="/api/projects")

LABEL = "Project"


def _project_values(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": text_value(payload, "name"),
        "description": text_value(payload, "description"),
        "status": text_value(payload, "status", PROJECT_STATUS_DEFAULT),
    }


@projects_bp.route("", methods=["GET"])
@token_required
def list_projects(identity: Identity):
    """Return all projects with their sprint, task and risk counts."""
    return jsonify(list_project_summaries())


@projects_bp.route("/<string:project_id>", methods=["GET"])
@token_required
def get_project(project_id: str, identity: Identity):
    return jsonify(get_project_summary(project_id))


@projects_bp.route("", methods=["POST"])
@token_required
def add_project(identity: Identity):
    """Create a project and its default kanban columns."""
    payload = json_payload()
    require_fields(payload, ("id", "name"))
    values = _project_values(payload)
    values["id"] = str(payload["id"]).strip()

    project = create_project(values)
    current_app.logger.info("User '%s' created project %s", identity.username, project.id)
    return jsonify({"message": "Project created successfully", "id": project.id})


@projects_bp.route("/<string:project_id>", methods=["PUT"])
@token_required
def edit_project(project_id: str, identity: Identity):
    payload = json_payload()
    require_fields(payload, ("name",))
    update_record(Project, project_id, _project_values(payload), LABEL)
    current_app.logger.info("User '%s' updated project %s", identity.username, project_id)
    return jsonify({"message": "Project updated successfully"})


@projects_bp.route("/<string:project_id>", methods=["DELETE"])
@token_required
def remove_project(project_id: str, identity: Identity):
    delete_record(Project, project_id, LABEL)
    current_app.logger.info("User '%s' deleted project %s", identity.username, project_id)
    return jsonify({"message": "Project deleted successfully"})
