"""SQLAlchemy models."""

from src.models.detail import Detail
from src.models.repair import Repair
from src.models.user import User

__all__ = [
    "User",
    "Repair",
    "Detail",
]
