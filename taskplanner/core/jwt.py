# taskplanner/core/jwt.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from taskplanner.config import get_settings


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """
    Issue an access token for `user_id`.
    Login flows live outside this service; this is used by tooling and tests.
    """
    settings = get_settings()
    expire = datetime.now(tz=timezone.utc) + (expires_delta or timedelta(minutes=60))
    payload: Dict[str, Any] = {"sub": user_id, "exp": expire, "typ": "access"}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Return the payload of a valid access token.
    Raises JWTError on bad signature, expiry or wrong token type.
    """
    settings = get_settings()
    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    if payload.get("typ") != "access":
        raise JWTError("Invalid token type")
    return payload


def decode_access_token(token: str):
    """verify_access_token, but None on failure."""
    try:
        return verify_access_token(token)
    except JWTError:
        return None
