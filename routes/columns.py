"""Kanban column routes.

Columns created through the API get ``<project_id>-COL<n>`` ids. A caller may
pick ``n`` by sending an id in that form; any other id is rejected. New
columns are appended after the existing ones unless ``order_index`` is given.
Only the columns created with a project are flagged as default.
"""
from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from models.kanban_column import KanbanColumn, column_id_prefix, is_column_id
from routes import json_payload, project_filter, token_required
from services.auth_service import Identity
from services.entity_service import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)
from services.project_service import next_column_id, next_column_order
from services.errors import ValidationError
from utils.payload import as_int, is_blank, require_fields, text_value

columns_bp = Blueprint("columns", __name__, url_prefix="/api/columns")

LABEL = "Column"
BOARD_ORDER = (KanbanColumn.order_index.asc(), KanbanColumn.project_id.asc(), KanbanColumn.id.asc())


@columns_bp.route("", methods=["GET"])
@token_required
def list_columns(identity: Identity):
    """Return columns in board order."""
    columns = list_records(KanbanColumn, LABEL, project_id=project_filter(), order_by=BOARD_ORDER)
    return jsonify([column.to_dict() for column in columns])


@columns_bp.route("/<string:column_id>", methods=["GET"])
@token_required
def get_column(column_id: str, identity: Identity):
    return jsonify(get_record(KanbanColumn, column_id, LABEL).to_dict())


@columns_bp.route("", methods=["POST"])
@token_required
def add_column(identity: Identity):
    payload = json_payload()
    require_fields(payload, ("project_id", "name"))
    project_id = str(payload["project_id"]).strip()
    column_id = text_value(payload, "id").strip()
    if not column_id:
        column_id = next_column_id(project_id)
    elif not is_column_id(project_id, column_id):
        raise ValidationError(
            "Validation error",
            message=f"Column id must look like '{column_id_prefix(project_id)}<n>'",
        )
    values = {
        "id": column_id,
        "project_id": project_id,
        "name": text_value(payload, "name"),
        "order_index": (
            next_column_order(project_id)
            if is_blank(payload.get("order_index"))
            else as_int(payload["order_index"], "order_index")
        ),
        "is_default": False,
    }

    column = create_record(KanbanColumn, values, LABEL)
    current_app.logger.info("User '%s' created column %s", identity.username, column.id)
    return jsonify({"message": "Column created successfully", "id": column.id})


@columns_bp.route("/<string:column_id>", methods=["PUT"])
@token_required
def edit_column(column_id: str, identity: Identity):
    payload = json_payload()
    require_fields(payload, ("name", "order_index"))
    values = {
        "name": text_value(payload, "name"),
        "order_index": as_int(payload["order_index"], "order_index"),
    }
    update_record(KanbanColumn, column_id, values, LABEL)
    current_app.logger.info("User '%s' updated column %s", identity.username, column_id)
    return jsonify({"message": "Column updated successfully"})


@columns_bp.route("/<string:column_id>", methods=["DELETE"])
@token_required
def remove_column(column_id: str, identity: Identity):
    delete_record(KanbanColumn, column_id, LABEL)
    current_app.logger.info("User '%s' deleted column %s", identity.username, column_id)
    return jsonify({"message": "Column deleted successfully"})
