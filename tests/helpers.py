"""Seed data and auth helpers for tests."""

import uuid
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.core.security import create_access_token
from hustle_village.models import Booking, Profile, Service


def auth_headers(user_id: uuid.UUID) -> dict[str, str]:
    """Bearer header for a user, signed like the auth provider's tokens."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def tomorrow() -> str:
    return (datetime.now(UTC) + timedelta(days=1)).date().isoformat()


def yesterday() -> str:
    return (datetime.now(UTC) - timedelta(days=1)).date().isoformat()


async def make_profile(db: AsyncSession, role: str = "buyer", full_name: str | None = None) -> Profile:
    profile = Profile(
        id=uuid.uuid4(),
        email=f"{uuid.uuid4().hex[:8]}@campus.edu",
        full_name=full_name or f"{role.title()} User",
        role=role,
    )
    db.add(profile)
    await db.commit()
    return profile


async def make_service(
    db: AsyncSession,
    owner: Profile,
    *,
    is_active: bool = True,
    is_verified: bool = True,
    title: str = "Resume review",
    description: str = "Line-by-line feedback on your CV",
    category: str = "tutoring",
    created_at: datetime | None = None,
) -> Service:
    service = Service(
        user_id=owner.id,
        title=title,
        description=description,
        category=category,
        portfolio="https://portfolio.example/cv",
        default_price=Decimal("15.00"),
        express_price=Decimal("25.00"),
        is_active=is_active,
        is_verified=is_verified,
    )
    if created_at is not None:
        service.created_at = created_at
    db.add(service)
    await db.commit()
    return service


async def make_booking(
    db: AsyncSession,
    buyer: Profile,
    service: Service,
    *,
    status: str = "pending",
    created_at: datetime | None = None,
) -> Booking:
    booking = Booking(
        buyer_id=buyer.id,
        service_id=service.id,
        date=(datetime.now(UTC) + timedelta(days=3)).date(),
        time="10:00",
        status=status,
    )
    if created_at is not None:
        booking.created_at = created_at
    db.add(booking)
    await db.commit()
    return booking

