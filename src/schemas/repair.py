"""Repair schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import RepairStatus


class RepairCreate(BaseModel):
    """Create a repair order."""

    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1886, le=2100)
    problem: str = Field(..., min_length=1)
    status: RepairStatus = RepairStatus.PENDING
    price: float = Field(..., ge=0)


class RepairUpdate(BaseModel):
    """Update a repair order. Omitted fields keep their value."""

    brand: str | None = Field(None, min_length=1, max_length=100)
    model: str | None = Field(None, min_length=1, max_length=100)
    year: int | None = Field(None, ge=1886, le=2100)
    problem: str | None = Field(None, min_length=1)
    status: RepairStatus | None = None
    price: float | None = Field(None, ge=0)


class RepairResponse(BaseModel):
    """Repair response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    brand: str
    model: str
    year: int
    problem: str
    status: RepairStatus
    price: float
    image_path: str | None
    created_at: datetime
    updated_at: datetime


class RepairListResponse(BaseModel):
    """One page of repairs."""

    repairs: list[RepairResponse]
    total: int
    page: int
    limit: int
