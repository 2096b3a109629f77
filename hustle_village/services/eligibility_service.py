"""Eligibility checks gating booking creation and seller actions."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from hustle_village.domain.eligibility import can_book_service
from hustle_village.models.service import Service

logger = logging.getLogger(__name__)


class EligibilityService:
    """Read-and-decide checks; never mutates state."""

    async def get_service(self, db: AsyncSession, service_id: UUID) -> Service:
        """Load a service or raise NotFoundError."""
        result = await db.execute(select(Service).where(Service.id == service_id))
        service = result.scalar_one_or_none()
        if not service:
            raise NotFoundError("Service")
        return service

    async def check_bookable(
        self,
        db: AsyncSession,
        acting_user_id: UUID | None,
        service_id: UUID | None,
    ) -> Service:
        """Return the service if ``acting_user_id`` may book it.

        Raises:
            ValidationError: If either identifier is missing
            NotFoundError: If the service does not exist
            AuthorizationError: If the service is unverified, inactive or
                owned by the acting user
        """
        if not acting_user_id or not service_id:
            raise ValidationError("User ID and Service ID are required")

        service = await self.get_service(db, service_id)

        allowed, reason = can_book_service(service, acting_user_id)
        if not allowed:
            logger.info(f"Booking of service {service_id} by {acting_user_id} denied: {reason}")
            raise AuthorizationError(reason)

        return service


eligibility_service = EligibilityService()
