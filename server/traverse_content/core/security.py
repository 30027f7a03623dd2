"""Bearer API tokens for the authenticated role."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from .config import settings

ALGORITHM = "HS256"


def create_api_token(subject: str, expires_in: Optional[timedelta] = timedelta(days=30)) -> str:
    """Issue a signed token; ``expires_in=None`` issues a non-expiring token."""
    payload: dict[str, Any] = {"sub": subject, "iat": datetime.now(timezone.utc)}
    if expires_in is not None:
        payload["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(payload, settings.api_token_secret, algorithm=ALGORITHM)


def decode_api_token(token: str) -> dict[str, Any]:
    """
    Verify a token and return its claims.

    Raises:
        jwt.PyJWTError: If the signature, expiry or payload is invalid
    """
    payload = jwt.decode(token, settings.api_token_secret, algorithms=[ALGORITHM])
    if not payload.get("sub"):
        raise jwt.InvalidTokenError("Token has no subject")
    return payload
