"""Errors raised by services and rendered as JSON by the app error handlers.

Every error carries the HTTP status it maps to and renders as
``{"error": ..., "message": ..., "details": ...}`` with the optional keys
omitted when unset.
"""
from __future__ import annotations

from typing import Any


class ApiError(Exception):
    status_code = 500

    def __init__(self, error: str, *, message: str | None = None, details: str | None = None):
        super().__init__(message or error)
        self.error = error
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(ApiError):
    """Required fields missing or unusable."""

    status_code = 400


class InvalidPrefix(ValidationError):
    pass


class AuthenticationError(ApiError):
    """Bad username or password."""

    status_code = 401


class Unauthenticated(ApiError):
    """No bearer token supplied."""

    status_code = 401


class InvalidToken(ApiError):
    """Token failed verification or has expired."""

    status_code = 401


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    status_code = 409


class InternalError(ApiError):
    status_code = 500


__all__ = [
    "ApiError",
    "AuthenticationError",
    "Conflict",
    "InternalError",
    "InvalidPrefix",
    "InvalidToken",
    "NotFound",
    "Unauthenticated",
    "ValidationError",
]
