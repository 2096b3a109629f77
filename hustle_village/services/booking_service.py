"""Booking lifecycle service.

Owns creation of bookings and every status transition. Each operation takes
the acting user's id explicitly and performs at most one write.
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import func

from hustle_village.core.exceptions import (
    AuthorizationError,
    InvalidBookingStatus,
    NotFoundError,
    StoreError,
    ValidationError,
)
from hustle_village.domain.booking_state import (
    INITIAL_BOOKING_STATUS,
    assert_booking_transition,
    resolve_initial_status,
)
from hustle_village.domain.eligibility import is_service_owner
from hustle_village.models.booking import Booking
from hustle_village.models.profile import Profile
from hustle_village.models.service import Service
from hustle_village.services.eligibility_service import EligibilityService, eligibility_service
from hustle_village.utils.validators import (
    booking_day,
    ensure_future,
    parse_booking_date,
    parse_booking_time,
)

logger = logging.getLogger(__name__)


class BookingService:
    """Service for the booking state machine."""

    def __init__(self, eligibility: EligibilityService | None = None):
        self.eligibility = eligibility or eligibility_service

    async def create_booking(
        self,
        db: AsyncSession,
        buyer_id: UUID,
        service_id: UUID | None,
        date: str | None,
        time: str | None,
        status: str | None = None,
        now: datetime | None = None,
    ) -> Booking:
        """Book a service for a future date.

        Args:
            db: Database session
            buyer_id: Acting user, who becomes the buyer
            service_id: Service to book
            date: ISO date or datetime; must be strictly after ``now``
            time: Clock time of the appointment
            status: Optional initial status; only ``pending`` is accepted
            now: Reference instant, defaults to the current UTC time

        Returns:
            Booking: The persisted booking in ``pending`` status
        """
        if not service_id:
            raise ValidationError("Service ID is required")
        if not date or not time:
            raise ValidationError("Date and time are required")

        booking_moment = parse_booking_date(date)
        ensure_future(booking_moment, now)
        booking_time = parse_booking_time(time)
        initial_status = resolve_initial_status(status)

        profile = await db.get(Profile, buyer_id)
        if not profile:
            raise NotFoundError(
                detail="User profile not found. Please complete your profile setup."
            )

        service = await self.eligibility.check_bookable(db, profile.id, service_id)

        booking = Booking(
            buyer_id=profile.id,
            service_id=service.id,
            date=booking_day(date),
            time=booking_time,
            status=initial_status,
        )
        db.add(booking)
        try:
            await db.flush()
            await db.refresh(booking)
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert booking for service {service_id}: {e}")
            raise StoreError("Failed to create booking")

        logger.info(f"Booking {booking.id} created by buyer {buyer_id} for service {service.id}")
        return booking

    async def accept_booking(
        self,
        db: AsyncSession,
        acting_user_id: UUID,
        booking_id: UUID,
    ) -> Booking:
        """Accept a pending booking (owning seller only).

        The write is conditional on the stored status still being ``pending``,
        so two concurrent accepts cannot both succeed.
        """
        result = await db.execute(
            select(Booking, Service.user_id)
            .join(Service, Booking.service_id == Service.id)
            .where(Booking.id == booking_id)
        )
        row = result.first()
        if not row:
            raise NotFoundError("Booking")

        booking, owner_id = row
        if owner_id != acting_user_id:
            raise AuthorizationError("You do not have permission to accept this booking")

        assert_booking_transition(booking.status, "accepted")

        try:
            update_result = await db.execute(
                update(Booking)
                .where(Booking.id == booking_id, Booking.status == INITIAL_BOOKING_STATUS)
                .values(status="accepted", updated_at=func.now())
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to accept booking {booking_id}: {e}")
            raise StoreError("Failed to accept booking")

        if update_result.rowcount == 0:
            logger.warning(f"Booking {booking_id} changed status before it could be accepted")
            raise InvalidBookingStatus("Booking is no longer pending")

        refreshed = await db.execute(
            select(Booking)
            .where(Booking.id == booking_id)
            .execution_options(populate_existing=True)
        )
        booking = refreshed.scalar_one()

        logger.info(f"Booking {booking_id} accepted by seller {acting_user_id}")
        return booking

    async def get_booking(
        self,
        db: AsyncSession,
        acting_user_id: UUID,
        booking_id: UUID,
    ) -> Booking:
        """Get a booking visible to its buyer or the service's seller."""
        result = await db.execute(
            select(Booking)
            .where(Booking.id == booking_id)
            .options(selectinload(Booking.service))
        )
        booking = result.scalar_one_or_none()
        if not booking:
            raise NotFoundError("Booking")

        is_buyer = booking.buyer_id == acting_user_id
        is_seller = booking.service is not None and is_service_owner(booking.service, acting_user_id)
        if not is_buyer and not is_seller:
            raise AuthorizationError("You do not have permission to view this booking")

        return booking


booking_service = BookingService()
