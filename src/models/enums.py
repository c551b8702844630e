"""Enums for model fields."""

from enum import Enum


class RepairStatus(str, Enum):
    """Lifecycle of a repair order."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
