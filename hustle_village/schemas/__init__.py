"""Pydantic schemas for API validation."""

from hustle_village.schemas.booking import (
    BookingCreate,
    BookingDetailResponse,
    BookingListResponse,
    BookingResponse,
    ServiceSummary,
)
from hustle_village.schemas.common import ApiResponse, error_body
from hustle_village.schemas.request import ServiceRequestCreate, ServiceRequestResponse
from hustle_village.schemas.service import (
    ProductListResponse,
    ProductResponse,
    SellerProfileResponse,
    SellerSetup,
    SellerSummary,
    ServiceCreate,
    ServiceResponse,
    ServiceUpdate,
    StorefrontSummary,
)

__all__ = [
    # Common
    "ApiResponse",
    "error_body",
    # Booking
    "BookingCreate",
    "BookingDetailResponse",
    "BookingListResponse",
    "BookingResponse",
    "ServiceSummary",
    # Service
    "ProductListResponse",
    "ProductResponse",
    "SellerProfileResponse",
    "SellerSetup",
    "SellerSummary",
    "ServiceCreate",
    "ServiceResponse",
    "ServiceUpdate",
    "StorefrontSummary",
    # Request
    "ServiceRequestCreate",
    "ServiceRequestResponse",
]
