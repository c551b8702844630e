"""Resource repository tests."""

import pytest

from src.exceptions import NotFoundError
from src.models.detail import Detail
from src.services.repository import DetailRepository, RepairRepository, ResourceRepository


def repair_fields(number: int) -> dict:
    return {
        "brand": f"Brand {number}",
        "model": "Civic",
        "year": 2010,
        "problem": "Engine light",
        "status": "pending",
        "price": 99.0,
    }


def test_list_second_page(db):
    """Page 2 with page size 10 skips the first ten records."""
    repairs = RepairRepository(db)
    created = [repairs.create(repair_fields(number)) for number in range(1, 26)]

    items, total = repairs.list(page=2, page_size=10)

    assert total == 25
    assert [item.id for item in items] == [item.id for item in created[10:20]]


def test_list_defaults_and_past_the_end(db):
    repairs = RepairRepository(db)
    for number in range(12):
        repairs.create(repair_fields(number))

    first_page, total = repairs.list()
    assert len(first_page) == 10
    assert total == 12

    beyond, total = repairs.list(page=5, page_size=10)
    assert beyond == []
    assert total == 12


def test_get_missing_raises(db):
    with pytest.raises(NotFoundError, match="Repair not found"):
        RepairRepository(db).get(424242)


def test_update_preserves_image_without_new_one(db):
    repairs = RepairRepository(db)
    repair = repairs.create(repair_fields(1), image_path="/uploads/old.png")

    repairs.update(repair.id, {"status": "completed"})

    stored = repairs.get(repair.id)
    assert stored.status == "completed"
    assert stored.image_path == "/uploads/old.png"


def test_update_replaces_image(db):
    repairs = RepairRepository(db)
    repair = repairs.create(repair_fields(1), image_path="/uploads/old.png")

    repairs.update(repair.id, {}, image_path="/uploads/new.png")

    assert repairs.get(repair.id).image_path == "/uploads/new.png"


def test_delete_missing_is_noop(db):
    details = DetailRepository(db)
    kept = details.create({"name": "Spark plug", "price": 5.0})

    assert details.delete(kept.id + 1000) is False
    _, total = details.list()
    assert total == 1

    assert details.delete(kept.id) is True
    _, total = details.list()
    assert total == 0


def test_generic_repository_with_explicit_model(db):
    """The base repository works for any model passed in."""
    repository = ResourceRepository(db, Detail)
    detail = repository.create({"name": "Fuse", "price": 1.5, "quantity": 40})
    assert repository.get(detail.id).quantity == 40
