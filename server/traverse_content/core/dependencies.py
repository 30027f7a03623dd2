"""FastAPI dependencies for database sessions and content API access."""

from typing import Optional

from fastapi import Depends, Header
from jwt import PyJWTError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import AUTHENTICATED_ROLE, PUBLIC_ROLE
from ..services.permission_service import PermissionService
from .database import get_db
from .exceptions import AuthenticationError, AuthorizationError
from .security import decode_api_token


async def get_request_role(
    authorization: Optional[str] = Header(None, alias="Authorization")
) -> str:
    """
    Resolve the role a request acts as.

    Requests without an Authorization header act as the public role; a valid
    bearer token acts as the authenticated role.

    Raises:
        AuthenticationError: If the header is malformed or the token invalid
    """
    if not authorization:
        return PUBLIC_ROLE

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError(detail="Invalid authorization header format")

    try:
        decode_api_token(token.strip())
    except PyJWTError as e:
        raise AuthenticationError(detail=f"Token validation failed: {e}") from e
    return AUTHENTICATED_ROLE


def require_permission(action: str):
    """Dependency factory: the request role must hold ``action``."""

    async def dependency(
        role: str = Depends(get_request_role),
        db: AsyncSession = Depends(get_db),
    ) -> str:
        if not await PermissionService(db).is_allowed(role, action):
            raise AuthorizationError(action=action, role=role)
        return role

    return dependency

