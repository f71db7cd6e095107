"""Next-identifier lookup used by clients before creating records."""
from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from routes import project_filter, token_required
from services.auth_service import Identity
from services.errors import InternalError
from services.identifier_service import next_id

identifiers_bp = Blueprint("identifiers", __name__, url_prefix="/api/generate-id")


@identifiers_bp.route("/<string:prefix>", methods=["GET"])
@token_required
def generate_id(prefix: str, identity: Identity):
    """Return the next free id for ``prefix`` (P, T, S, R or M).

    The id is not reserved; a concurrent create may take it first, in which
    case the create answers 409 and the client asks again.
    """
    try:
        identifier = next_id(prefix, project_filter())
    except SQLAlchemyError as exc:
        raise InternalError("Failed to generate ID", details=str(exc)) from exc
    return jsonify({"id": identifier})
