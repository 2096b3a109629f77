"""API dependencies for authentication and common operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hustle_village.core.exceptions import AuthenticationError
from hustle_village.core.security import resolve_user_id
from hustle_village.database import get_db

# Security scheme; missing credentials are reported as 401 by the dependency
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> UUID:
    """Resolve the acting user's id from the bearer token."""
    if not credentials or not credentials.credentials:
        raise AuthenticationError()
    return resolve_user_id(credentials.credentials)


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]

__all__ = ["CurrentUserId", "get_current_user_id", "get_db"]
