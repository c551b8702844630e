"""Configuration management for the application."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    mysql_host: str = Field(default="localhost")
    mysql_user: str = Field(default="repair_user")
    mysql_password: str = Field(default="repair_password")
    mysql_database: str = Field(default="repair_shop")
    mysql_port: int = Field(default=3306)
    # Full SQLAlchemy URL, takes precedence over the MYSQL_* parts when set
    database_url: str | None = Field(default=None)
    db_pool_size: int = Field(default=10)
    db_pool_timeout: int = Field(default=10)  # seconds to wait for a free connection
    create_tables: bool = Field(default=True)

    # JWT
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=60)

    # Passwords
    bcrypt_rounds: int = Field(default=12, ge=10)

    # Files
    upload_dir: str = Field(default="uploads")
    public_dir: str = Field(default="public")
    max_upload_bytes: int = Field(default=10 * 1024 * 1024)

    # API
    port: int = Field(default=3000)
    environment: str = Field(default="development")
    cors_origins: list[str] = Field(default=["http://localhost:8000"])
    max_page_size: int = Field(default=100)
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def sqlalchemy_database_url(self) -> str:
        """Connection URL for the relational store."""
        if self.database_url:
            return self.database_url
        return (
            f"mysql+pymysql://{self.mysql_user}:{quote_plus(self.mysql_password)}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
