"""Core utilities: errors, security and middleware."""

from hustle_village.core.exceptions import (
    AppException,
    AuthenticationError,
    AuthorizationError,
    InvalidBookingStatus,
    NotFoundError,
    RateLimitExceeded,
    StoreError,
    ValidationError,
)
from hustle_village.core.security import create_access_token, resolve_user_id, verify_token

__all__ = [
    "AppException",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidBookingStatus",
    "NotFoundError",
    "RateLimitExceeded",
    "StoreError",
    "ValidationError",
    "create_access_token",
    "resolve_user_id",
    "verify_token",
]
