"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - final_host is the only value the wire format reads from the environment,
      and it reaches the serializer explicitly through WireContext
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from cyanvas.core.domain_types import Locale


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://cyanvas:cyanvas@db:5432/cyanvas"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Sonolus wire format
    final_host: str | None = None
    default_locale: Locale = Locale.EN
    asset_root: str = "assets"

    # Discovery feed
    random_pool_size: int = 100
    random_pool_ttl_seconds: int = 3600
    chart_count_ttl_seconds: int = 300

    # API
    cors_origins: list[str] = ["http://localhost:3100"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
