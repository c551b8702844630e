"""Detail (spare part) model."""

from sqlalchemy import Boolean, Column, Float, Integer, Numeric, String, Text

from src.database import Base
from src.models.mixins import TimestampMixin


class Detail(Base, TimestampMixin):
    """A spare part kept in stock."""

    __tablename__ = "details"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=True)
    weight = Column(Float, nullable=True)  # kilograms
    image_path = Column(String(255), nullable=True)
