"""Health check and schema administration routes (no token required)."""
from __future__ import annotations

from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from database import db
from routes import timestamp
from services.errors import InternalError

system_bp = Blueprint("system", __name__, url_prefix="/api")


@system_bp.route("/health", methods=["GET"])
def health():
    return jsonify(
        {
            "status": "OK",
            "message": "Project Scope API is running",
            "timestamp": timestamp(),
        }
    )


@system_bp.route("/init-db", methods=["POST"])
def init_db():
    """Create any missing tables."""
    try:
        db.create_all()
    except SQLAlchemyError as exc:
        current_app.logger.error("Database initialization error: %s", exc, exc_info=True)
        raise InternalError("Database initialization failed", message=str(exc)) from exc
    current_app.logger.info("Database schema initialized")
    return jsonify({"success": True, "message": "Database initialized successfully"})


@system_bp.route("/reset-db", methods=["POST"])
def reset_db():
    """Drop every table and recreate the schema. All data is lost."""
    try:
        db.session.remove()
        db.drop_all()
        db.create_all()
    except SQLAlchemyError as exc:
        current_app.logger.error("Database reset error: %s", exc, exc_info=True)
        raise InternalError("Database reset failed", message=str(exc)) from exc
    current_app.logger.warning("Database schema was reset")
    return jsonify(
        {"success": True, "message": "Database reset and initialized successfully"}
    )
