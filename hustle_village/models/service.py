"""Service (seller offering) model."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from hustle_village.database import Base

if TYPE_CHECKING:
    from hustle_village.models.booking import Booking
    from hustle_village.models.profile import Profile

SERVICE_CATEGORIES = (
    "food_baking",
    "design_creative",
    "tutoring",
    "beauty_hair",
    "events_music",
    "tech_dev",
)


class Service(Base):
    """An offering listed by a seller."""

    __tablename__ = "services"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Basic Info
    title: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    portfolio: Mapped[str | None] = mapped_column(Text)

    # Pricing
    default_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    default_delivery_time: Mapped[str | None] = mapped_column(String(50))
    express_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    express_delivery_time: Mapped[str | None] = mapped_column(String(50))

    # Status
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)  # seller-toggled
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False)  # platform-controlled

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    owner: Mapped["Profile"] = relationship("Profile", back_populates="services")
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="service")
