"""Public product catalog endpoints."""

from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.api.deps import get_db
from hustle_village.config import settings
from hustle_village.schemas.common import ApiResponse
from hustle_village.schemas.service import ProductListResponse, ProductResponse
from hustle_village.services.catalog_service import catalog_service

router = APIRouter()


@router.get("", response_model=ApiResponse[ProductListResponse])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    category: str | None = Query(default=None),
    search: str | None = Query(default=None, max_length=100),
    limit: int = Query(default=settings.catalog_default_limit, ge=1, le=settings.catalog_max_limit),
    offset: int = Query(default=0, ge=0),
    sort_by: Literal["created_at", "title", "default_price"] = Query(default="created_at", alias="sortBy"),
    order: Literal["asc", "desc"] = Query(default="desc"),
) -> ApiResponse[ProductListResponse]:
    """Browse active services."""
    services = await catalog_service.list_products(
        db,
        category=category,
        search=search,
        limit=limit,
        offset=offset,
        sort_by=sort_by,
        order=order,
    )
    products = [ProductResponse.model_validate(s) for s in services]
    return ApiResponse[ProductListResponse](
        status=status.HTTP_200_OK,
        msg="Products retrieved successfully",
        data=ProductListResponse(
            products=products,
            count=len(products),
            limit=limit,
            offset=offset,
        ),
    )


@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
async def get_product(
    product_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ProductResponse]:
    """Get an active service by ID."""
    service = await catalog_service.get_product(db, product_id)
    return ApiResponse[ProductResponse](
        status=status.HTTP_200_OK,
        msg="Product retrieved successfully",
        data=ProductResponse.model_validate(service),
    )
