"""Seller service management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.api.deps import CurrentUserId, get_db
from hustle_village.schemas.common import ApiResponse
from hustle_village.schemas.service import (
    SellerProfileResponse,
    SellerSetup,
    ServiceCreate,
    ServiceResponse,
    ServiceUpdate,
)
from hustle_village.services.seller_service import seller_service

router = APIRouter()


@router.post("/setup", response_model=ApiResponse[SellerProfileResponse])
async def setup_seller(
    seller_data: SellerSetup,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[SellerProfileResponse]:
    """Create or replace the current user's storefront."""
    seller = await seller_service.setup_seller(db, user_id, seller_data)
    return ApiResponse[SellerProfileResponse](
        status=status.HTTP_200_OK,
        msg="Seller info saved successfully",
        data=SellerProfileResponse.model_validate(seller),
    )


@router.post(
    "/services",
    response_model=ApiResponse[ServiceResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_service(
    service_data: ServiceCreate,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ServiceResponse]:
    """List a new service."""
    service = await seller_service.create_service(db, user_id, service_data)
    return ApiResponse[ServiceResponse](
        status=status.HTTP_201_CREATED,
        msg="Service created successfully",
        data=ServiceResponse.model_validate(service),
    )


@router.get("/services", response_model=ApiResponse[list[ServiceResponse]])
async def get_my_services(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ServiceResponse]]:
    """Get all services for the current seller."""
    services = await seller_service.list_my_services(db, user_id)
    return ApiResponse[list[ServiceResponse]](
        status=status.HTTP_200_OK,
        msg="Services retrieved successfully",
        data=[ServiceResponse.model_validate(s) for s in services],
    )


@router.put("/services/{service_id}", response_model=ApiResponse[ServiceResponse])
async def edit_service(
    service_id: UUID,
    updates: ServiceUpdate,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ServiceResponse]:
    """Update a service owned by the current seller."""
    service = await seller_service.edit_service(db, user_id, service_id, updates)
    return ApiResponse[ServiceResponse](
        status=status.HTTP_200_OK,
        msg="Service updated successfully",
        data=ServiceResponse.model_validate(service),
    )


@router.patch("/services/{service_id}/toggle", response_model=ApiResponse[ServiceResponse])
async def toggle_service(
    service_id: UUID,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ServiceResponse]:
    """Activate or deactivate a service."""
    service = await seller_service.toggle_service(db, user_id, service_id)
    state = "active" if service.is_active else "inactive"
    return ApiResponse[ServiceResponse](
        status=status.HTTP_200_OK,
        msg=f"Service is now {state}",
        data=ServiceResponse.model_validate(service),
    )
