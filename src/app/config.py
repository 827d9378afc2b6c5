"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class PaginationSettings(BaseModel):
    """
    Customer listing page sizes.

    default_limit: Page size used when the request omits ``limit``.
    max_limit: Largest page size a request may ask for.
    """

    default_limit: int = Field(default=10, ge=1)
    max_limit: int = Field(default=100, ge=1)


class CorsSettings(BaseModel):
    """Origins allowed to call the API from a browser."""

    allow_origins: list[str] = ["*"]


class LoggingSettings(BaseModel):
    level: str = "INFO"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: PAGINATION__MAX_LIMIT=50, LOGGING__LEVEL=DEBUG
    """

    # Application metadata
    app_name: str = "CRM API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/crm"
    database_echo: bool = False

    # Nested settings groups
    pagination: PaginationSettings = PaginationSettings()
    cors: CorsSettings = CorsSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
