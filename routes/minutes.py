"""Meeting minutes routes."""
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from models.minutes import Minutes
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

minutes_bp = Blueprint("minutes", __name__, url_prefix="/api/minutes")

LABEL = "Minutes"
REQUIRED_FIELDS = ("title", "meeting_date")


def _minutes_values(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": text_value(payload, "title"),
        "content": text_value(payload, "content"),
        "meeting_date": date_value(payload, "meeting_date"),
    }


@minutes_bp.route("", methods=["GET"])
@token_required
def list_minutes(identity: Identity):
    records = list_records(Minutes, LABEL, project_id=project_filter())
    return jsonify([record.to_dict() for record in records])


@minutes_bp.route("/<string:minutes_id>", methods=["GET"])
@token_required
def get_minutes(minutes_id: str, identity: Identity):
    return jsonify(get_record(Minutes, minutes_id, LABEL).to_dict())


@minutes_bp.route("", methods=["POST"])
@token_required
def add_minutes(identity: Identity):
    payload = json_payload()
    require_fields(payload, ("id", "project_id") + REQUIRED_FIELDS)
    values = _minutes_values(payload)
    values["id"] = str(payload["id"]).strip()
    values["project_id"] = str(payload["project_id"]).strip()

    record = create_record(Minutes, values, LABEL)
    current_app.logger.info("User '%s' created minutes %s", identity.username, record.id)
    return jsonify({"message": "Minutes created successfully", "id": record.id})


@minutes_bp.route("/<string:minutes_id>", methods=["PUT"])
@token_required
def edit_minutes(minutes_id: str, identity: Identity):
    payload = json_payload()
    require_fields(payload, REQUIRED_FIELDS)
    update_record(Minutes, minutes_id, _minutes_values(payload), LABEL)
    current_app.logger.info("User '%s' updated minutes %s", identity.username, minutes_id)
    return jsonify({"message": "Minutes updated successfully"})


@minutes_bp.route("/<string:minutes_id>", methods=["DELETE"])
@token_required
def remove_minutes(minutes_id: str, identity: Identity):
    delete_record(Minutes, minutes_id, LABEL)
    current_app.logger.info("User '%s' deleted minutes %s", identity.username, minutes_id)
    return jsonify({"message": "Minutes deleted successfully"})
