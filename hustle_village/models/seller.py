"""Seller storefront model."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from hustle_village.database import Base

if TYPE_CHECKING:
    from hustle_village.models.profile import Profile


class Seller(Base):
    """Storefront details a user saves when they become a seller.

    One row per user; saving again overwrites it.
    """

    __tablename__ = "sellers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    title: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(30), nullable=False)
    portfolio: Mapped[str | None] = mapped_column(Text)

    default_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    default_delivery_time: Mapped[str | None] = mapped_column(String(50))
    express_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    express_delivery_time: Mapped[str | None] = mapped_column(String(50))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    profile: Mapped["Profile"] = relationship("Profile", back_populates="storefront")
