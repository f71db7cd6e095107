"""Risk register routes."""
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from models.risk import RISK_STATUS_DEFAULT, RISK_STRATEGY_DEFAULT, Risk
from routes import json_payload, project_filter, token_required
from services.auth_service import Identity
from services.entity_service import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)
from utils.payload import int_value, require_fields, text_value

risks_bp = Blueprint("risks", __name__, url_prefix="/api/risks")

LABEL = "Risk"


def _risk_values(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": text_value(payload, "name"),
        "description": text_value(payload, "description"),
        "impact": int_value(payload, "impact", 1),
        "probability": int_value(payload, "probability", 1),
        "mitigation_plan": text_value(payload, "mitigation_plan"),
        "strategy": text_value(payload, "strategy", RISK_STRATEGY_DEFAULT),
        "status": text_value(payload, "status", RISK_STATUS_DEFAULT),
    }


@risks_bp.route("", methods=["GET"])
@token_required
def list_risks(identity: Identity):
    risks = list_records(Risk, LABEL, project_id=project_filter())
    return jsonify([risk.to_dict() for risk in risks])


@risks_bp.route("/<string:risk_id>", methods=["GET"])
@token_required
def get_risk(risk_id: str, identity: Identity):
    return jsonify(get_record(Risk, risk_id, LABEL).to_dict())


@risks_bp.route("", methods=["POST"])
@token_required
def add_risk(identity: Identity):
    payload = json_payload()
    require_fields(payload, ("id", "project_id", "name"))
    values = _risk_values(payload)
    values["id"] = str(payload["id"]).strip()
    values["project_id"] = str(payload["project_id"]).strip()

    risk = create_record(Risk, values, LABEL)
    current_app.logger.info("User '%s' created risk %s", identity.username, risk.id)
    return jsonify({"message": "Risk created successfully", "id": risk.id})


@risks_bp.route("/<string:risk_id>", methods=["PUT"])
@token_required
def edit_risk(risk_id: str, identity: Identity):
    payload = json_payload()
    require_fields(payload, ("name",))
    update_record(Risk, risk_id, _risk_values(payload), LABEL)
    current_app.logger.info("User '%s' updated risk %s", identity.username, risk_id)
    return jsonify({"message": "Risk updated successfully"})


@risks_bp.route("/<string:risk_id>", methods=["DELETE"])
@token_required
def remove_risk(risk_id: str, identity: Identity):
    delete_record(Risk, risk_id, LABEL)
    current_app.logger.info("User '%s' deleted risk %s", identity.username, risk_id)
    return jsonify({"message": "Risk deleted successfully"})
