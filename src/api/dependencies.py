"""FastAPI dependencies for authentication and database."""

import logging
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from src.config import Settings
from src.database import get_db
from src.exceptions import InvalidTokenError, ValidationError
from src.services.auth import AuthService, PasswordHasher, TokenService
from src.services.repository import DetailRepository, RepairRepository
from src.services.storage import ImageStorage

logger = logging.getLogger(__name__)

# Missing header yields None here; get_current_user_id turns it into a 401
security = HTTPBearer(auto_error=False)

# Keeps (page - 1) * limit well inside a signed 64-bit OFFSET
MAX_PAGE_NUMBER = 1_000_000_000


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    """Token service built from the app's settings."""
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    """Password hasher built from the app's settings."""
    return request.app.state.password_hasher


def get_image_storage(request: Request) -> ImageStorage:
    """Image storage rooted at the configured upload directory."""
    return request.app.state.image_storage


def get_current_user_id(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> int:
    """Get the authenticated user id from the bearer token.

    A missing token raises ``MissingTokenError`` (401); any verification
    failure raises an ``InvalidTokenError`` subclass (403). On success the id
    is also stored on ``request.state.user_id``.
    """
    token = credentials.credentials if credentials else None
    try:
        user_id = tokens.verify(token)
    except InvalidTokenError as exc:
        logger.debug(f"Rejected token on {request.url.path}: {type(exc).__name__}")
        raise

    request.state.user_id = user_id
    return user_id


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, hasher, tokens)


def get_repair_repository(
    db: Annotated[Session, Depends(get_db)],
) -> RepairRepository:
    """Get repair repository."""
    return RepairRepository(db)


def get_detail_repository(
    db: Annotated[Session, Depends(get_db)],
) -> DetailRepository:
    """Get detail repository."""
    return DetailRepository(db)


def parse_form(schema: type[BaseModel], data: dict[str, Any]) -> BaseModel:
    """Validate multipart form values against a request schema.

    ``None`` values are dropped so update schemas only see submitted fields.
    """
    submitted = {key: value for key, value in data.items() if value is not None}
    try:
        return schema.model_validate(submitted)
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from None


@dataclass
class Pagination:
    """Validated page request."""

    page: int
    limit: int


def get_pagination(
    settings: Annotated[Settings, Depends(get_app_settings)],
    page: Annotated[int, Query(ge=1, le=MAX_PAGE_NUMBER)] = 1,
    limit: Annotated[int, Query(ge=1)] = 10,
) -> Pagination:
    """Read ``page``/``limit`` query parameters, capping the page size."""
    if limit > settings.max_page_size:
        raise ValidationError(f"limit must not exceed {settings.max_page_size}")
    return Pagination(page=page, limit=limit)
