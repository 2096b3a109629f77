"""Bearer token handling for identities issued by the managed auth provider."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from hustle_village.config import settings
from hustle_village.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def create_access_token(
    user_id: UUID | str,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed access token in the auth provider's format.

    Used by local tooling and tests; production tokens come from the provider.
    """
    to_encode: dict[str, Any] = {"sub": str(user_id), "role": "authenticated"}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode["exp"] = expire
    if settings.jwt_audience:
        to_encode["aud"] = settings.jwt_audience
    if settings.jwt_issuer:
        to_encode["iss"] = settings.jwt_issuer
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a bearer token."""
    options = {"verify_aud": bool(settings.jwt_audience)}
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options=options,
        )
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise AuthenticationError("Invalid or expired token")


def resolve_user_id(token: str) -> UUID:
    """Return the user id carried in the token's subject claim."""
    payload = verify_token(token)
    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Invalid token payload")
    try:
        return UUID(str(subject))
    except ValueError:
        raise AuthenticationError("Invalid token subject")
