"""JWT token utilities."""

import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import get_settings

if TYPE_CHECKING:
    from ..core.models.user import User


def create_access_token(user: "User", expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed access token carrying the user's identity claims."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))

    claims = {
        "sub": str(user.id),
        "email": user.email,
        "fullName": user.full_name,
        "userId": str(user.id),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": expire,
        "jti": str(uuid.uuid4()),
        "type": "access",
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def create_refresh_token() -> str:
    """Create an opaque random refresh token (256 bits)."""
    return secrets.token_urlsafe(32)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate an access token.

    Checks signature, expiry, issuer and audience. Returns None when any check
    fails so callers can answer with a uniform 401.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError:
        return None

    if payload.get("type") != "access":
        return None
    return payload


def get_user_id_from_token(token: str) -> Optional[UUID]:
    """Extract the acting user's id from the ``userId`` claim."""
    payload = decode_access_token(token)
    if not payload:
        return None

    user_id = payload.get("userId")
    if not user_id:
        return None

    try:
        return UUID(str(user_id))
    except ValueError:
        return None


def refresh_tokens_match(stored: Optional[str], presented: str) -> bool:
    """Constant-time comparison of a presented refresh token with the stored one."""
    if not stored or not presented:
        return False
    return secrets.compare_digest(stored.encode("utf-8"), presented.encode("utf-8"))
