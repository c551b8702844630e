"""Detail (spare part) API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from src.api.dependencies import (
    Pagination,
    get_current_user_id,
    get_detail_repository,
    get_image_storage,
    get_pagination,
    parse_form,
)
from src.schemas.common import CreatedResponse, MessageResponse
from src.schemas.detail import DetailCreate, DetailListResponse, DetailResponse, DetailUpdate
from src.services.repository import DetailRepository
from src.services.storage import ImageStorage

router = APIRouter(
    prefix="/api/details",
    tags=["details"],
    dependencies=[Depends(get_current_user_id)],
)

FormField = Annotated[str | None, Form()]


def detail_create_form(
    name: FormField = None,
    description: FormField = None,
    price: FormField = None,
    quantity: FormField = None,
    is_available: FormField = None,
    weight: FormField = None,
) -> DetailCreate:
    """Collect multipart fields into a ``DetailCreate``."""
    return parse_form(
        DetailCreate,
        {
            "name": name,
            "description": description,
            "price": price,
            "quantity": quantity,
            "is_available": is_available,
            "weight": weight,
        },
    )


def detail_update_form(
    name: FormField = None,
    description: FormField = None,
    price: FormField = None,
    quantity: FormField = None,
    is_available: FormField = None,
    weight: FormField = None,
) -> DetailUpdate:
    """Collect multipart fields into a ``DetailUpdate``."""
    return parse_form(
        DetailUpdate,
        {
            "name": name,
            "description": description,
            "price": price,
            "quantity": quantity,
            "is_available": is_available,
            "weight": weight,
        },
    )


@router.get("", response_model=DetailListResponse)
def list_details(
    pagination: Annotated[Pagination, Depends(get_pagination)],
    details: Annotated[DetailRepository, Depends(get_detail_repository)],
):
    """List details one page at a time."""
    items, total = details.list(page=pagination.page, page_size=pagination.limit)
    return DetailListResponse(
        details=items, total=total, page=pagination.page, limit=pagination.limit
    )


@router.get("/{detail_id}", response_model=DetailResponse)
def get_detail(
    detail_id: int,
    details: Annotated[DetailRepository, Depends(get_detail_repository)],
):
    """Get a specific detail."""
    return details.get(detail_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_detail(
    detail_data: Annotated[DetailCreate, Depends(detail_create_form)],
    details: Annotated[DetailRepository, Depends(get_detail_repository)],
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
    image: Annotated[UploadFile | None, File()] = None,
):
    """Create a detail, optionally with an image."""
    image_path = storage.save(image) if image else None
    detail = details.create(detail_data.model_dump(), image_path=image_path)
    return CreatedResponse(id=detail.id)


@router.put("/{detail_id}", response_model=MessageResponse)
def update_detail(
    detail_id: int,
    detail_data: Annotated[DetailUpdate, Depends(detail_update_form)],
    details: Annotated[DetailRepository, Depends(get_detail_repository)],
    storage: Annotated[ImageStorage, Depends(get_image_storage)],
    image: Annotated[UploadFile | None, File()] = None,
):
    """Update a detail. The current image is kept unless a new one is uploaded."""
    details.get(detail_id)
    image_path = storage.save(image) if image else None
    details.update(detail_id, detail_data.model_dump(exclude_unset=True), image_path=image_path)
    return MessageResponse(message="Detail updated")


@router.delete("/{detail_id}", response_model=MessageResponse)
def delete_detail(
    detail_id: int,
    details: Annotated[DetailRepository, Depends(get_detail_repository)],
):
    """Delete a detail. Deleting an unknown id still succeeds."""
    details.delete(detail_id)
    return MessageResponse(message="Detail deleted")
