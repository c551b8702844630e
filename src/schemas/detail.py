"""Detail schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DetailCreate(BaseModel):
    """Create a spare part."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    quantity: int = Field(0, ge=0)
    is_available: bool = True
    weight: float | None = Field(None, ge=0)


class DetailUpdate(BaseModel):
    """Update a spare part. Omitted fields keep their value."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    quantity: int | None = Field(None, ge=0)
    is_available: bool | None = None
    weight: float | None = Field(None, ge=0)


class DetailResponse(BaseModel):
    """Detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    price: float
    quantity: int
    is_available: bool
    weight: float | None
    image_path: str | None
    created_at: datetime
    updated_at: datetime


class DetailListResponse(BaseModel):
    """One page of details."""

    details: list[DetailResponse]
    total: int
    page: int
    limit: int
