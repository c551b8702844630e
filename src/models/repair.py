"""Repair model."""

from sqlalchemy import Column, Integer, Numeric, String, Text

from src.database import Base
from src.models.enums import RepairStatus
from src.models.mixins import TimestampMixin


class Repair(Base, TimestampMixin):
    """A vehicle brought in for repair."""

    __tablename__ = "repairs"

    id = Column(Integer, primary_key=True, index=True)
    brand = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    problem = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=RepairStatus.PENDING.value)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    image_path = Column(String(255), nullable=True)  # public path under /uploads
