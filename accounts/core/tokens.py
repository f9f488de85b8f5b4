"""Signed session tokens (JWT, HS256) issued on login."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from jose import jwt
from jose.exceptions import JOSEError

from .config import get_settings

ALGORITHM = "HS256"


class TokenSigningError(Exception):
    """Raised when a token cannot be produced."""


class InvalidTokenError(Exception):
    """Raised when a token fails signature, expiry or claim checks."""


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    username: str
    uuid: str
    email: str
    is_admin: int


def _resolve_secret(secret: str) -> str:
    value = secret or get_settings().jwt_secret
    if not value:
        raise TokenSigningError("jwt secret is not configured")
    return value


def sign_token(
    claims: TokenClaims,
    secret: str = "",
    *,
    now: Optional[int] = None,
    ttl_seconds: Optional[int] = None,
) -> str:
    """Encode ``claims`` into a signed token.

    An empty ``secret`` falls back to ``JWT_SECRET``. ``now`` and
    ``ttl_seconds`` default to the wall clock and ``JWT_EXPIRE_SECONDS``.
    """
    key = _resolve_secret(secret)
    issued = int(now if now is not None else time.time())
    ttl = ttl_seconds if ttl_seconds is not None else get_settings().jwt_expire_seconds
    payload = {
        "user_id": claims.user_id,
        "username": claims.username,
        "uuid": claims.uuid,
        "email": claims.email,
        "is_admin": claims.is_admin,
        "nbf": issued,
        "iat": issued,
        "exp": issued + ttl,
    }
    try:
        return jwt.encode(payload, key, algorithm=ALGORITHM)
    except JOSEError as exc:
        raise TokenSigningError(str(exc)) from exc


def parse_token(token: str, secret: str = "") -> TokenClaims:
    """Verify ``token`` and return the claims it carries."""
    try:
        key = _resolve_secret(secret)
    except TokenSigningError as exc:
        raise InvalidTokenError(str(exc)) from exc
    try:
        payload = jwt.decode(token or "", key, algorithms=[ALGORITHM])
    except JOSEError as exc:
        raise InvalidTokenError("token is invalid or expired") from exc
    try:
        return TokenClaims(
            user_id=int(payload["user_id"]),
            username=payload.get("username") or "",
            uuid=payload["uuid"],
            email=payload.get("email") or "",
            is_admin=int(payload.get("is_admin") or 0),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError("token payload is incomplete") from exc
