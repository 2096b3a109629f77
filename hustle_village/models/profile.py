"""Profile model."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from hustle_village.database import Base

if TYPE_CHECKING:
    from hustle_village.models.booking import Booking
    from hustle_village.models.request import ServiceRequest
    from hustle_village.models.seller import Seller
    from hustle_village.models.service import Service


class Profile(Base):
    """Marketplace profile keyed by the auth provider's user id.

    Rows are created by the identity provider's signup flow; this service
    only reads them.
    """

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, index=True)
    full_name: Mapped[str | None] = mapped_column(String(150))
    avatar_url: Mapped[str | None] = mapped_column(Text)
    role: Mapped[str] = mapped_column(
        String(10), nullable=False, default="buyer"
    )  # buyer, seller, both

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    services: Mapped[list["Service"]] = relationship("Service", back_populates="owner")
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="buyer")
    storefront: Mapped["Seller"] = relationship(
        "Seller", back_populates="profile", uselist=False
    )
    requests: Mapped[list["ServiceRequest"]] = relationship(
        "ServiceRequest", back_populates="requester"
    )
