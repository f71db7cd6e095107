"""Helpers for reading JSON request payloads and rendering values."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Mapping

from services.errors import ValidationError


def isoformat(value: date | datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()


def is_blank(value: Any) -> bool:
    """True for values that do not count as a supplied field."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Raise ValidationError listing every required field that is missing."""
    missing = [field for field in fields if is_blank(payload.get(field))]
    if missing:
        raise ValidationError(
            "Validation error",
            message=f"Missing required fields: {', '.join(missing)}",
        )


def text_value(payload: Mapping[str, Any], field: str, default: str = "") -> str:
    value = payload.get(field)
    if is_blank(value):
        return default
    return str(value)


def date_value(payload: Mapping[str, Any], field: str) -> date | None:
    """Parse an ISO date (``YYYY-MM-DD``); a full ISO datetime is accepted too."""
    value = payload.get(field)
    if is_blank(value):
        return None
    try:
        return datetime.fromisoformat(str(value).strip()).date()
    except ValueError as exc:
        raise ValidationError(
            "Validation error",
            message=f"Field '{field}' must be a date in YYYY-MM-DD format",
        ) from exc


def as_int(value: Any, field: str) -> int:
    """Convert ``value`` to an int, rejecting booleans and fractional numbers."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError("Validation error", message=f"Field '{field}' must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            "Validation error",
            message=f"Field '{field}' must be an integer",
        ) from exc


def int_value(payload: Mapping[str, Any], field: str, default: int) -> int:
    value = payload.get(field)
    if is_blank(value) or value == 0:
        return default
    return as_int(value, field)


__all__ = [
    "as_int",
    "date_value",
    "int_value",
    "is_blank",
    "isoformat",
    "require_fields",
    "text_value",
]
