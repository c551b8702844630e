"""CRUD repositories for the shop's resource collections."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from src.exceptions import NotFoundError
from src.models.detail import Detail
from src.models.repair import Repair

logger = logging.getLogger(__name__)


class ResourceRepository:
    """Paginated CRUD over one ORM model.

    Queries go through the ORM, so every field value is sent as a bound
    parameter. Each write commits on its own.
    """

    model: Any = None
    label = "Resource"

    def __init__(self, db: Session, model: Any = None):
        self.db = db
        if model is not None:
            self.model = model

    def list(self, page: int = 1, page_size: int = 10) -> tuple[list[Any], int]:
        """Return one page of records, ordered by id, and the total count."""
        offset = (page - 1) * page_size
        items = (
            self.db.query(self.model)
            .order_by(self.model.id)
            .limit(page_size)
            .offset(offset)
            .all()
        )
        total = self.db.query(self.model).count()
        return items, total

    def get(self, item_id: int) -> Any:
        """Get a record by id."""
        item = self.db.query(self.model).filter(self.model.id == item_id).first()
        if item is None:
            raise NotFoundError(f"{self.label} not found")
        return item

    def create(self, fields: dict[str, Any], image_path: str | None = None) -> Any:
        """Insert a record and return it with its generated id."""
        item = self.model(**fields, image_path=image_path)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info(f"Created {self.label.lower()} {item.id}")
        return item

    def update(self, item_id: int, fields: dict[str, Any], image_path: str | None = None) -> Any:
        """Apply the given fields to a record.

        The stored image reference is only replaced when a new one is given.
        """
        item = self.get(item_id)
        for field, value in fields.items():
            setattr(item, field, value)
        if image_path is not None:
            item.image_path = image_path
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item_id: int) -> bool:
        """Delete a record. Deleting a missing id is a no-op."""
        deleted = self.db.query(self.model).filter(self.model.id == item_id).delete()
        self.db.commit()
        if deleted:
            logger.info(f"Deleted {self.label.lower()} {item_id}")
        return bool(deleted)


class RepairRepository(ResourceRepository):
    """Repository for repair orders."""

    model = Repair
    label = "Repair"


class DetailRepository(ResourceRepository):
    """Repository for spare parts."""

    model = Detail
    label = "Detail"
