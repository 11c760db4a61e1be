"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings are read once at startup; catalog defaults are built from them
      after logging and the database are initialized

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: a local SQLite file works out of the box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from employee_cards.core.catalog_defaults import (
    DEFAULT_LOGO_GREEN, DEFAULT_LOGO_PURPLE, DEFAULT_STORAGE_KEY,
)
from employee_cards.core.domain_types import IMAGE_EDIT_SIZE


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./employee_cards.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10
    auto_create_schema: bool = True

    # Record store
    storage_key: str = DEFAULT_STORAGE_KEY
    seed_path: str | None = None

    # Card defaults
    logo_green: str = DEFAULT_LOGO_GREEN
    logo_purple: str = DEFAULT_LOGO_PURPLE

    # Image editing
    image_edit_size: int = IMAGE_EDIT_SIZE
    max_image_bytes: int = 10_000_000

    # Form sessions
    max_open_forms: int = 100

    # Navigation
    list_view_path: str = "/dashboard.html"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
