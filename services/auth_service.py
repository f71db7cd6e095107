"""Credential checks and bearer-token handling."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from flask import current_app

from models.user import User
from services.errors import AuthenticationError, InvalidToken, Unauthenticated

JWT_ALGORITHM = "HS256"
DEFAULT_TOKEN_HOURS = 24
BEARER_SCHEME = "bearer"


@dataclass(frozen=True)
class Identity:
    """Claims of a verified token, passed to the views that need them."""

    id: int
    username: str
    email: str
    full_name: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _secret() -> str:
    secret = current_app.config.get("JWT_SECRET")
    if not secret:
        raise RuntimeError("JWT_SECRET is not configured.")
    return secret


def token_lifetime() -> timedelta:
    hours = current_app.config.get("JWT_EXPIRES_HOURS", DEFAULT_TOKEN_HOURS)
    return timedelta(hours=int(hours))


def authenticate_user(username: str, password: str) -> User:
    """Return the active user matching the credentials.

    Raises AuthenticationError without revealing which check failed.
    """
    user = User.query.filter_by(username=username).first()
    if user is None or not user.is_active or not user.check_password(password):
        current_app.logger.warning("Failed login attempt for username '%s'", username)
        raise AuthenticationError(
            "Authentication failed", message="Invalid username or password"
        )
    return user


def issue_token(user: User, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "full_name": user.full_name,
        "iat": issued_at,
        "exp": issued_at + token_lifetime(),
    }
    return jwt.encode(claims, _secret(), algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> Identity:
    """Verify ``token`` and return its identity.

    Bad signatures, malformed tokens and expired tokens all raise InvalidToken.
    """
    try:
        claims = jwt.decode(token, _secret(), algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError as exc:
        current_app.logger.info("Rejected bearer token: %s", exc)
        raise InvalidToken("Access denied", message="Invalid or expired token") from exc
    try:
        return Identity(
            id=claims["id"],
            username=claims["username"],
            email=claims.get("email") or "",
            full_name=claims.get("full_name") or "",
        )
    except KeyError as exc:
        raise InvalidToken("Access denied", message="Invalid or expired token") from exc


def bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise Unauthenticated("Access denied", message="No token provided")
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        raise Unauthenticated("Access denied", message="No token provided")
    return token


def authenticate_request(authorization: str | None) -> Identity:
    return decode_token(bearer_token(authorization))


__all__ = [
    "Identity",
    "authenticate_request",
    "authenticate_user",
    "bearer_token",
    "decode_token",
    "issue_token",
    "token_lifetime",
]
