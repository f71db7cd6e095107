"""Shared helpers for route blueprints."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import wraps
from typing import Any

from flask import request

from services.auth_service import authenticate_request

__all__ = ["json_payload", "project_filter", "timestamp", "token_required"]


def token_required(view):
    """Reject the request unless it carries a valid bearer token.

    The verified identity is passed to the view as the ``identity`` keyword
    argument.
    """

    @wraps(view)
    def decorated_function(*args, **kwargs):
        identity = authenticate_request(request.headers.get("Authorization"))
        return view(*args, identity=identity, **kwargs)

    return decorated_function


def json_payload() -> dict[str, Any]:
    """Return the JSON body as a dict; anything else counts as empty."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def project_filter() -> str | None:
    value = (request.args.get("project_id") or "").strip()
    return value or None


def timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()
