"""Open service requests posted by buyers."""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.core.exceptions import NotFoundError, StoreError
from hustle_village.models.profile import Profile
from hustle_village.models.request import ServiceRequest
from hustle_village.schemas.request import ServiceRequestCreate

logger = logging.getLogger(__name__)


class RequestService:
    """Service for posting requests."""

    async def create_request(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: ServiceRequestCreate,
    ) -> ServiceRequest:
        """Post a request; it starts ``active``."""
        if not await db.get(Profile, user_id):
            raise NotFoundError(
                detail="User profile not found. Please complete your profile setup."
            )

        request = ServiceRequest(user_id=user_id, **data.model_dump(), status="active")
        db.add(request)
        try:
            await db.flush()
            await db.refresh(request)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create request for user {user_id}: {e}")
            raise StoreError("Failed to create request")

        logger.info(f"Request {request.id} posted by user {user_id}")
        return request


request_service = RequestService()
