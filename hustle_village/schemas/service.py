"""Service and product catalog schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

CATEGORY_PATTERN = "^(food_baking|design_creative|tutoring|beauty_hair|events_music|tech_dev)$"


class ServiceBase(BaseModel):
    """Base service schema."""

    title: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., min_length=1, max_length=5000)
    category: str = Field(..., pattern=CATEGORY_PATTERN)
    portfolio: str = Field(..., min_length=1, max_length=5000)

    # Pricing
    default_price: Decimal | None = Field(None, ge=0, le=1000000)
    default_delivery_time: str | None = Field(None, max_length=50)
    express_price: Decimal | None = Field(None, ge=0, le=1000000)
    express_delivery_time: str | None = Field(None, max_length=50)


class ServiceCreate(ServiceBase):
    """Schema for listing a new service."""


class ServiceUpdate(BaseModel):
    """Schema for a seller editing a service.

    ``is_verified`` is accepted so legacy clients do not fail validation,
    but it is never persisted from this payload.
    """

    title: str | None = Field(None, min_length=1, max_length=150)
    description: str | None = Field(None, min_length=1, max_length=5000)
    category: str | None = Field(None, pattern=CATEGORY_PATTERN)
    portfolio: str | None = Field(None, min_length=1, max_length=5000)
    default_price: Decimal | None = Field(None, ge=0, le=1000000)
    default_delivery_time: str | None = Field(None, max_length=50)
    express_price: Decimal | None = Field(None, ge=0, le=1000000)
    express_delivery_time: str | None = Field(None, max_length=50)
    is_verified: bool | None = None


class ServiceResponse(BaseModel):
    """Schema for service response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    title: str
    description: str
    category: str
    portfolio: str | None
    default_price: Decimal | None
    default_delivery_time: str | None
    express_price: Decimal | None
    express_delivery_time: str | None
    is_active: bool
    is_verified: bool
    created_at: datetime | None
    updated_at: datetime | None


class StorefrontSummary(BaseModel):
    """Storefront headline shown with a seller."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    category: str


class SellerSummary(BaseModel):
    """Public seller fields shown alongside a product."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str | None
    storefront: StorefrontSummary | None = None


class ProductResponse(ServiceResponse):
    """A catalog entry: an active service plus its seller."""

    seller: SellerSummary | None = Field(None, validation_alias="owner")


class ProductListResponse(BaseModel):
    """Schema for a catalog page."""

    products: list[ProductResponse]
    count: int
    limit: int
    offset: int


class SellerSetup(ServiceBase):
    """Storefront details saved when a user becomes a seller."""


class SellerProfileResponse(BaseModel):
    """Schema for a saved storefront."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    title: str
    description: str
    category: str
    portfolio: str | None
    default_price: Decimal | None
    default_delivery_time: str | None
    express_price: Decimal | None
    express_delivery_time: str | None
    created_at: datetime | None
    updated_at: datetime | None
