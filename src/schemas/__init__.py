"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import RegisterResponse, Token, UserLogin, UserRegister, UserResponse
from src.schemas.common import CreatedResponse, MessageResponse
from src.schemas.detail import DetailCreate, DetailListResponse, DetailResponse, DetailUpdate
from src.schemas.repair import RepairCreate, RepairListResponse, RepairResponse, RepairUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "RegisterResponse",
    "UserResponse",
    "CreatedResponse",
    "MessageResponse",
    "RepairCreate",
    "RepairUpdate",
    "RepairResponse",
    "RepairListResponse",
    "DetailCreate",
    "DetailUpdate",
    "DetailResponse",
    "DetailListResponse",
]
