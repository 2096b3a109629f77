"""Public product catalog over active services."""

from typing import Literal
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hustle_village.core.exceptions import NotFoundError
from hustle_village.models.profile import Profile
from hustle_village.models.service import Service

SORTABLE_COLUMNS = {
    "created_at": Service.created_at,
    "title": Service.title,
    "default_price": Service.default_price,
}


class CatalogService:
    """Browse and search active services."""

    async def list_products(
        self,
        db: AsyncSession,
        category: str | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
        sort_by: str = "created_at",
        order: Literal["asc", "desc"] = "desc",
    ) -> list[Service]:
        """List active services with optional category and text filters.

        ``search`` matches title or description case-insensitively.
        """
        column = SORTABLE_COLUMNS.get(sort_by, Service.created_at)
        query = (
            select(Service)
            .where(Service.is_active.is_(True))
            .options(selectinload(Service.owner).selectinload(Profile.storefront))
        )

        if category:
            query = query.where(Service.category == category)

        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(Service.title.ilike(pattern), Service.description.ilike(pattern))
            )

        query = query.order_by(column.asc() if order == "asc" else column.desc())
        query = query.offset(offset).limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_product(self, db: AsyncSession, product_id: UUID) -> Service:
        """Get a single active service."""
        result = await db.execute(
            select(Service)
            .where(Service.id == product_id, Service.is_active.is_(True))
            .options(selectinload(Service.owner).selectinload(Profile.storefront))
        )
        service = result.scalar_one_or_none()
        if not service:
            raise NotFoundError("Product")
        return service


catalog_service = CatalogService()
