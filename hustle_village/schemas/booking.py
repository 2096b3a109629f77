"""Booking-related Pydantic schemas."""

import datetime as dt
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BookingCreate(BaseModel):
    """Schema for booking a service.

    Fields are optional at the schema level so missing values are reported
    with the same messages as other booking validation failures.
    """

    model_config = ConfigDict(populate_by_name=True)

    service_id: UUID | None = Field(None, alias="serviceId")
    date: str | None = Field(None, max_length=40)
    time: str | None = Field(None, max_length=8)
    status: str | None = Field(None, max_length=20)


class ServiceSummary(BaseModel):
    """Service fields embedded in booking reads."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    category: str
    default_price: Decimal | None
    express_price: Decimal | None


class BookingResponse(BaseModel):
    """Schema for booking response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    buyer_id: UUID
    service_id: UUID
    date: dt.date
    time: str
    status: str
    created_at: dt.datetime | None
    updated_at: dt.datetime | None


class BookingDetailResponse(BookingResponse):
    """Booking with its linked service summary."""

    service: ServiceSummary | None = None


class BookingListResponse(BaseModel):
    """Schema for a user's bookings."""

    bookings: list[BookingDetailResponse]
