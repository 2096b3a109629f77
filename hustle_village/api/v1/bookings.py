"""Booking endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.api.deps import CurrentUserId, get_db
from hustle_village.core.exceptions import ValidationError
from hustle_village.core.middleware import booking_limiter
from hustle_village.schemas.booking import (
    BookingCreate,
    BookingDetailResponse,
    BookingListResponse,
    BookingResponse,
)
from hustle_village.schemas.common import ApiResponse
from hustle_village.services.booking_query_service import booking_query_service
from hustle_village.services.booking_service import booking_service

router = APIRouter()


@router.post(
    "/book-now",
    response_model=ApiResponse[BookingResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(booking_limiter)],
)
async def book_now(
    booking_data: BookingCreate,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[BookingResponse]:
    """Book a service for a future date."""
    booking = await booking_service.create_booking(
        db,
        buyer_id=user_id,
        service_id=booking_data.service_id,
        date=booking_data.date,
        time=booking_data.time,
        status=booking_data.status,
    )
    return ApiResponse[BookingResponse](
        status=status.HTTP_201_CREATED,
        msg="Booking created successfully",
        data=BookingResponse.model_validate(booking),
    )


@router.get("", response_model=ApiResponse[BookingListResponse])
async def get_my_bookings(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
    role: str = Query(default="buyer"),
) -> ApiResponse[BookingListResponse]:
    """Get bookings for the current user as buyer or seller."""
    if role not in ("buyer", "seller"):
        raise ValidationError("Role must be 'buyer' or 'seller'")

    bookings = await booking_query_service.list_for_user(db, user_id, role)
    msg = "Bookings retrieved successfully" if bookings else "No bookings found"
    return ApiResponse[BookingListResponse](
        status=status.HTTP_200_OK,
        msg=msg,
        data=BookingListResponse(
            bookings=[BookingDetailResponse.model_validate(b) for b in bookings]
        ),
    )


@router.get("/{booking_id}", response_model=ApiResponse[BookingDetailResponse])
async def get_booking(
    booking_id: UUID,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[BookingDetailResponse]:
    """Get a booking by ID (buyer or seller only)."""
    booking = await booking_service.get_booking(db, user_id, booking_id)
    return ApiResponse[BookingDetailResponse](
        status=status.HTTP_200_OK,
        msg="Booking retrieved successfully",
        data=BookingDetailResponse.model_validate(booking),
    )


@router.patch("/{booking_id}/accept", response_model=ApiResponse[BookingResponse])
async def accept_booking(
    booking_id: UUID,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[BookingResponse]:
    """Accept a pending booking (seller only)."""
    booking = await booking_service.accept_booking(db, user_id, booking_id)
    return ApiResponse[BookingResponse](
        status=status.HTTP_200_OK,
        msg="Booking accepted successfully",
        data=BookingResponse.model_validate(booking),
    )
