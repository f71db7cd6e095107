"""Sprint routes."""
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from models.sprint import SPRINT_STATUS_DEFAULT, Sprint
from routes import json_payload, project_filter, token_required
from services.auth_service import Identity
from services.entity_service import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)
from utils.payload import date_value, require_fields, text_value

sprints_bp = Blueprint("sprints", __name__, url_prefix="/api/sprints")

LABEL = "Sprint"
REQUIRED_FIELDS = ("name", "start_date", "end_date")


def _sprint_values(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": text_value(payload, "name"),
        "start_date": date_value(payload, "start_date"),
        "end_date": date_value(payload, "end_date"),
        "status": text_value(payload, "status", SPRINT_STATUS_DEFAULT),
    }


@sprints_bp.route("", methods=["GET"])
@token_required
def list_sprints(identity: Identity):
    sprints = list_records(Sprint, LABEL, project_id=project_filter())
    return jsonify([sprint.to_dict() for sprint in sprints])


@sprints_bp.route("/<string:sprint_id>", methods=["GET"])
@token_required
def get_sprint(sprint_id: str, identity: Identity):
    return jsonify(get_record(Sprint, sprint_id, LABEL).to_dict())


@sprints_bp.route("", methods=["POST"])
@token_required
def add_sprint(identity: Identity):
    payload = json_payload()
    require_fields(payload, ("id", "project_id") + REQUIRED_FIELDS)
    values = _sprint_values(payload)
    values["id"] = str(payload["id"]).strip()
    values["project_id"] = str(payload["project_id"]).strip()

    sprint = create_record(Sprint, values, LABEL)
    current_app.logger.info("User '%s' created sprint %s", identity.username, sprint.id)
    return jsonify({"message": "Sprint created successfully", "id": sprint.id})


@sprints_bp.route("/<string:sprint_id>", methods=["PUT"])
@token_required
def edit_sprint(sprint_id: str, identity: Identity):
    payload = json_payload()
    require_fields(payload, REQUIRED_FIELDS)
    update_record(Sprint, sprint_id, _sprint_values(payload), LABEL)
    current_app.logger.info("User '%s' updated sprint %s", identity.username, sprint_id)
    return jsonify({"message": "Sprint updated successfully"})


@sprints_bp.route("/<string:sprint_id>", methods=["DELETE"])
@token_required
def remove_sprint(sprint_id: str, identity: Identity):
    delete_record(Sprint, sprint_id, LABEL)
    current_app.logger.info("User '%s' deleted sprint %s", identity.username, sprint_id)
    return jsonify({"message": "Sprint deleted successfully"})
