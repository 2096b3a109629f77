"""Seller-side management of listed services."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.core.exceptions import NotFoundError, StoreError, ValidationError
from hustle_village.models.profile import Profile
from hustle_village.models.seller import Seller
from hustle_village.models.service import Service
from hustle_village.schemas.service import SellerSetup, ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)

# Fields a seller can never set through an edit
PROTECTED_FIELDS = frozenset({"id", "user_id", "is_verified", "is_active", "created_at"})


def clean_service_updates(updates: dict[str, Any]) -> dict[str, Any]:
    """Drop protected fields and empty values from a seller's edit payload."""
    return {
        field: value
        for field, value in updates.items()
        if value is not None and field not in PROTECTED_FIELDS
    }


def _seller_insert(dialect_name: str):
    """Dialect insert supporting ``ON CONFLICT`` for the storefront upsert."""
    if dialect_name == "sqlite":
        return sqlite_insert(Seller)
    return pg_insert(Seller)


class SellerService:
    """Service for sellers managing their own offerings."""

    async def setup_seller(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: SellerSetup,
    ) -> Seller:
        """Save the user's storefront, replacing any earlier one."""
        profile = await db.get(Profile, user_id)
        if not profile:
            raise NotFoundError(
                detail="User profile not found. Please complete your profile setup."
            )

        values = data.model_dump()
        stmt = _seller_insert(db.bind.dialect.name).values(user_id=user_id, **values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Seller.user_id],
            set_={**{field: stmt.excluded[field] for field in values}, "updated_at": func.now()},
        )

        try:
            await db.execute(stmt)
            result = await db.execute(
                select(Seller)
                .where(Seller.user_id == user_id)
                .execution_options(populate_existing=True)
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to save storefront for seller {user_id}: {e}")
            raise StoreError("Failed to save seller info")

        seller = result.scalar_one()
        logger.info(f"Storefront {seller.id} saved for seller {user_id}")
        return seller

    async def create_service(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: ServiceCreate,
    ) -> Service:
        """List a new service. Verification is always left to the platform."""
        service = Service(
            user_id=user_id,
            **data.model_dump(),
            is_active=True,
            is_verified=False,
        )
        db.add(service)
        try:
            await db.flush()
            await db.refresh(service)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create service for seller {user_id}: {e}")
            raise StoreError("Service creation failed")

        logger.info(f"Service {service.id} created by seller {user_id}")
        return service

    async def list_my_services(self, db: AsyncSession, user_id: UUID) -> list[Service]:
        """Get all services owned by the user, newest first."""
        result = await db.execute(
            select(Service)
            .where(Service.user_id == user_id)
            .order_by(Service.created_at.desc())
        )
        return list(result.scalars().all())

    async def edit_service(
        self,
        db: AsyncSession,
        user_id: UUID,
        service_id: UUID,
        updates: ServiceUpdate,
    ) -> Service:
        """Apply a seller's edit to a service they own."""
        service = await self._get_owned_service(db, user_id, service_id)

        clean_updates = clean_service_updates(updates.model_dump(exclude_unset=True))
        if not clean_updates:
            raise ValidationError("No valid fields to update")

        for field, value in clean_updates.items():
            setattr(service, field, value)

        try:
            await db.flush()
            await db.refresh(service)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update service {service_id}: {e}")
            raise StoreError("Failed to update service")

        logger.info(f"Service {service_id} updated: {sorted(clean_updates)}")
        return service

    async def toggle_service(
        self,
        db: AsyncSession,
        user_id: UUID,
        service_id: UUID,
    ) -> Service:
        """Flip a service between active and inactive."""
        service = await self._get_owned_service(db, user_id, service_id)
        service.is_active = not service.is_active

        try:
            await db.flush()
            await db.refresh(service)
        except SQLAlchemyError as e:
            logger.error(f"Failed to toggle service {service_id}: {e}")
            raise StoreError("Failed to update service status")

        logger.info(f"Service {service_id} is now {'active' if service.is_active else 'inactive'}")
        return service

    async def _get_owned_service(
        self,
        db: AsyncSession,
        user_id: UUID,
        service_id: UUID,
    ) -> Service:
        result = await db.execute(
            select(Service).where(Service.id == service_id, Service.user_id == user_id)
        )
        service = result.scalar_one_or_none()
        if not service:
            raise NotFoundError(detail="Service not found or you do not have permission")
        return service


seller_service = SellerService()
