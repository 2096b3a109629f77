"""Service request endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hustle_village.api.deps import CurrentUserId, get_db
from hustle_village.schemas.common import ApiResponse
from hustle_village.schemas.request import ServiceRequestCreate, ServiceRequestResponse
from hustle_village.services.request_service import request_service

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[ServiceRequestResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_request(
    request_data: ServiceRequestCreate,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ServiceRequestResponse]:
    """Post a request for a service nobody lists yet."""
    request = await request_service.create_request(db, user_id, request_data)
    return ApiResponse[ServiceRequestResponse](
        status=status.HTTP_201_CREATED,
        msg="Request created successfully",
        data=ServiceRequestResponse.model_validate(request),
    )
