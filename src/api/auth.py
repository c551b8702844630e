"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service, get_current_user_id
from src.schemas.auth import RegisterResponse, Token, UserLogin, UserRegister, UserResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user = auth.register(user_data.email, user_data.password)
    return RegisterResponse(id=user.id, email=user.email)


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    return Token(token=auth.authenticate(credentials.email, credentials.password))


@router.get("/me", response_model=UserResponse)
def get_me(
    user_id: Annotated[int, Depends(get_current_user_id)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get current user information."""
    return auth.get_user(user_id)
