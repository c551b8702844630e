"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api import auth, details, frontend, repairs
from src.api.exception_handlers import setup_exception_handlers
from src.config import Settings, get_settings
from src.database import check_connection, create_db_engine, create_session_factory, init_db
from src.services.auth import PasswordHasher, TokenService
from src.services.storage import ImageStorage

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the database before serving and dispose of the pool on shutdown."""
    engine = app.state.engine
    try:
        check_connection(engine)
    except Exception:
        logger.exception("Database connection failed")
        raise
    logger.info("Successfully connected to database")

    if app.state.settings.create_tables:
        init_db(engine)
    app.state.image_storage.ensure_dir()

    yield

    engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from explicit settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Repair Shop API",
        description="Repairs and spare parts catalogue for a vehicle-repair shop",
        version="0.1.0",
        lifespan=lifespan,
    )

    engine = create_db_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.jwt_expiration_minutes,
    )
    app.state.image_storage = ImageStorage(
        settings.upload_dir, public_prefix="/uploads", max_bytes=settings.max_upload_bytes
    )

    # CORS only outside production; the built frontend is served same-origin
    if not settings.is_production:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    # Register routers
    app.include_router(auth.router)
    app.include_router(repairs.router)
    app.include_router(details.router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    uploads = StaticFiles(directory=settings.upload_dir, check_dir=False)
    app.mount("/uploads", uploads, name="uploads")
    app.include_router(frontend.router)

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.port)  # noqa: S104


if __name__ == "__main__":
    run()
