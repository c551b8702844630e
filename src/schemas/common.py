"""Shared response schemas."""

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Id of a newly created record."""

    id: int


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
