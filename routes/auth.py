"""Login and token inspection routes."""
from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from routes import json_payload, timestamp, token_required
from services.auth_service import Identity, authenticate_user, issue_token, token_lifetime
from services.errors import ValidationError

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _expires_in() -> str:
    hours = int(token_lifetime().total_seconds() // 3600)
    return f"{hours}h"


@auth_bp.route("/login", methods=["POST"])
def login():
    """Exchange username and password for a bearer token."""
    payload = json_payload()
    username = (payload.get("username") or "").strip()
    password = payload.get("password") or ""
    if not username or not password:
        raise ValidationError(
            "Validation error", message="Username and password are required"
        )

    user = authenticate_user(username, password)
    token = issue_token(user)
    current_app.logger.info("User '%s' logged in", user.username)
    return jsonify(
        {
            "message": "Login successful",
            "token": token,
            "user": user.to_dict(),
            "expiresIn": _expires_in(),
        }
    )


@auth_bp.route("/logout", methods=["POST"])
@token_required
def logout(identity: Identity):
    # Tokens are stateless; the client discards its copy.
    current_app.logger.info("User '%s' logged out", identity.username)
    return jsonify({"message": "Logout successful", "timestamp": timestamp()})


@auth_bp.route("/verify", methods=["GET"])
@token_required
def verify(identity: Identity):
    return jsonify(
        {
            "message": "Token is valid",
            "user": identity.to_dict(),
            "timestamp": timestamp(),
        }
    )


@auth_bp.route("/me", methods=["GET"])
@token_required
def me(identity: Identity):
    return jsonify({"user": identity.to_dict(), "timestamp": timestamp()})
