"""Access tokens and the request identity dependency for the notes API.

Tokens carry the user id in `sub` and the account email in `email`. The
resolved user id is also a directory name in the file stores, so anything
that could escape data/users/ is refused before a route sees it.
"""
from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

DEFAULT_EXP_MINUTES = 24 * 60

bearer = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def _signing_key() -> str:
    key = os.getenv("JWT_SECRET", "")
    if not key:
        raise RuntimeError("JWT_SECRET is not set")
    return key


def _algorithm() -> str:
    return os.getenv("JWT_ALGORITHM", "HS256")


def _token_lifetime() -> timedelta:
    try:
        minutes = int(os.getenv("JWT_EXP_MINUTES", str(DEFAULT_EXP_MINUTES)))
    except ValueError:
        minutes = DEFAULT_EXP_MINUTES
    return timedelta(minutes=minutes)


def create_access_token(subject: str, email: Optional[str] = None) -> str:
    issued = datetime.now(timezone.utc)
    claims: dict[str, Any] = {
        "sub": subject,
        "iat": int(issued.timestamp()),
        "exp": int((issued + _token_lifetime()).timestamp()),
    }
    if email is not None:
        claims["email"] = email
    return jwt.encode(claims, _signing_key(), algorithm=_algorithm())


def decode_token(token: str) -> dict:
    return jwt.decode(token, _signing_key(), algorithms=[_algorithm()])


def is_safe_user_id(user_id: str) -> bool:
    return bool(user_id) and not any(ch in user_id for ch in "/\\") and ".." not in user_id


def _user_from_token(token: str) -> str:
    try:
        claims = decode_token(token)
    except JWTError:
        raise _unauthorized("Invalid or expired token")
    sub = claims.get("sub")
    if not sub or not is_safe_user_id(str(sub)):
        raise _unauthorized("Invalid token")
    return str(sub)


def get_current_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> str:
    """Bearer token first; the X-User-Id header is accepted for demos and tests."""
    if creds is not None and creds.scheme.lower() == "bearer":
        return _user_from_token(creds.credentials)

    if x_user_id is None or not x_user_id.strip():
        raise _unauthorized("Missing credentials")
    if not is_safe_user_id(x_user_id):
        raise _unauthorized("Invalid user id")
    return x_user_id
