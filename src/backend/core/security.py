"""Security utilities for identity tokens.

The identity provider is external: it signs short-lived JWTs whose ``sub``
claim is the caller's stable, opaque identity. This module only validates
those tokens. ``create_identity_token`` mirrors the provider's format and is
used by local tooling and tests.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from core.config import settings


def create_identity_token(
    identity: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed identity token for ``identity``."""
    now = datetime.now(timezone.utc)
    delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": identity,
        "exp": now + delta,
        "iat": now,
        "iss": settings.TOKEN_ISSUER,
        "aud": settings.TOKEN_AUDIENCE,
        "jti": secrets.token_urlsafe(16),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any] | None:
    """
    Decode and validate an identity token.

    Returns:
        The decoded payload or None if the token is invalid or expired
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            issuer=settings.TOKEN_ISSUER,
            audience=settings.TOKEN_AUDIENCE,
        )
    except JWTError:
        return None


def identity_from_token(token: str | None) -> str | None:
    """Extract the identity (``sub`` claim) from a token, or None."""
    if not token:
        return None
    payload = decode_token(token)
    if payload is None:
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject
