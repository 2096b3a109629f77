"""Service request schemas."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ServiceRequestCreate(BaseModel):
    """Schema for posting a request."""

    title: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., min_length=1, max_length=5000)
    needed_by: dt.date


class ServiceRequestResponse(BaseModel):
    """Schema for request response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    title: str
    description: str
    needed_by: dt.date
    status: str
    created_at: dt.datetime | None
