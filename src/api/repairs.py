"""Repair API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from src.api.dependencies import (
    Pagination,
    get_current_user_id,
    get_image_storage,
    get_pagination,
    get_repair_repository,
    parse_form,
)
from src.schemas.common import CreatedResponse, MessageResponse
from src.schemas.repair import RepairCreate, RepairListResponse, RepairResponse, RepairUpdate
from src.services.repository import RepairRepository
from src.services.storage import ImageStorage

router = APIRouter(
    prefix="/api/repairs",
    tags=["repairs"],
    dependencies=[Depends(get_current_user_id)],
)

FormField = Annotated[str | None, Form()]


def repair_create_form(
    brand: FormField = None,
    model: FormField = None,
    year: FormField = None,
    problem: FormField = None,
    status: FormField = None,
    price: FormField = None,
) -> RepairCreate:
    """Collect multipart fields into a ``RepairCreate``."""
    return parse_form(
        RepairCreate,
        {
            "brand": brand,
            "model": model,
            "year": year,
            "problem": problem,
            "status": status,
            "price": price,
        },
    )


def repair_update_form(
    brand: FormField = None,
    model: FormField = None,
    year: FormField = None,
    problem: FormField = None,
    status: FormField = None,
    price: FormField = None,
) -> RepairUpdate:
    """Collect multipart fields into a ``RepairUpdate``."""
    return parse_form(
        RepairUpdate,
        {
            "brand": brand,
            "model": model,
            "year": year,
            "problem": problem,
            "status": status,
            "price": price,
        },
    )


@router.get("", response_model=RepairListResponse)
def list_repairs(
    pagination: Annotated[Pagination, Depends(get_pagination)],
    repairs: Annotated[RepairRepository, Depends(get_repair_repository)],
):
    """List repairs one page at a time."""
    items, total = repairs.list(page=pagination.page, page_size=pagination.limit)
    return RepairListResponse(
        repairs=items, total=total, page=pagination.page, limit=pagination.limit
    )


@router.get("/{repair_id}", response_model=RepairResponse)
def get_repair(
    repair_id: int,
    repairs: Annotated[RepairRepository, Depends(get_repair_repository)],
):
    """Get a specific repair."""
    return repairs.get(repair_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_repair(
    repair_data: Annotated[RepairCreate, Depends(repair_create_form)],
    repairs: Annotated[RepairRepository, Depends(get_repair_repository)],
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
    image: Annotated[UploadFile | None, File()] = None,
):
    """Create a repair, optionally with an image."""
    image_path = storage.save(image) if image else None
    repair = repairs.create(repair_data.model_dump(mode="json"), image_path=image_path)
    return CreatedResponse(id=repair.id)


@router.put("/{repair_id}", response_model=MessageResponse)
def update_repair(
    repair_id: int,
    repair_data: Annotated[RepairUpdate, Depends(repair_update_form)],
    repairs: Annotated[RepairRepository, Depends(get_repair_repository)],
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
    image: Annotated[UploadFile | None, File()] = None,
):
    """Update a repair. The current image is kept unless a new one is uploaded."""
    repairs.get(repair_id)
    image_path = storage.save(image) if image else None
    repairs.update(
        repair_id, repair_data.model_dump(mode="json", exclude_unset=True), image_path=image_path
    )
    return MessageResponse(message="Repair updated")


@router.delete("/{repair_id}", response_model=MessageResponse)
def delete_repair(
    repair_id: int,
    repairs: Annotated[RepairRepository, Depends(get_repair_repository)],
):
    """Delete a repair. Deleting an unknown id still succeeds."""
    repairs.delete(repair_id)
    return MessageResponse(message="Repair deleted")
