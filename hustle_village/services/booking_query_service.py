"""Read-only booking listings for buyers and sellers."""

from typing import Literal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hustle_village.core.exceptions import StoreError
from hustle_village.models.booking import Booking
from hustle_village.models.service import Service

BookingRole = Literal["buyer", "seller"]


class BookingQueryService:
    """Service answering "which bookings does this user have"."""

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        role: BookingRole = "buyer",
    ) -> list[Booking]:
        """List bookings for a user, newest first.

        As ``buyer`` this returns the user's own bookings. As ``seller`` it
        returns every booking on a service the user owns, or an empty list
        when they own none.
        """
        query = select(Booking).options(selectinload(Booking.service))

        try:
            if role == "buyer":
                query = query.where(Booking.buyer_id == user_id)
            else:
                service_ids = await self._owned_service_ids(db, user_id)
                if not service_ids:
                    return []
                query = query.where(Booking.service_id.in_(service_ids))

            result = await db.execute(query.order_by(Booking.created_at.desc()))
        except SQLAlchemyError:
            raise StoreError("Failed to retrieve bookings")

        return list(result.scalars().all())

    async def _owned_service_ids(self, db: AsyncSession, user_id: UUID) -> list[UUID]:
        result = await db.execute(select(Service.id).where(Service.user_id == user_id))
        return list(result.scalars().all())


booking_query_service = BookingQueryService()
