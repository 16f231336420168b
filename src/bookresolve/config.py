"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class BookResolveSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="BOOKRESOLVE_",
    )

    # Commerce catalog (Rakuten Books)
    rakuten_application_id: str | None = Field(
        default=None,
        description="Rakuten application ID (enables the commerce provider)",
    )
    rakuten_affiliate_id: str | None = Field(
        default=None,
        description="Rakuten affiliate ID (optional, adds affiliate links)",
    )

    # Generic volume index (Google Books)
    google_books_api_key: str | None = Field(
        default=None,
        description="Google Books API key (optional, increases quotas)",
    )

    # Provider calls
    provider_timeout: float = Field(
        default=15.0,
        gt=0.0,
        le=60.0,
        description="Per-provider request timeout in seconds",
    )

    # Result cache
    cache_ttl: int = Field(
        default=15 * 60,
        gt=0,
        description="Result cache TTL in seconds",
    )
    cache_max_entries: int = Field(
        default=100,
        gt=0,
        description="Maximum number of cached queries",
    )
    cache_max_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Maximum aggregate serialized size of cached records",
    )

    # Recent query history
    recent_query_limit: int = Field(
        default=10,
        gt=0,
        description="Number of recent keyword queries to remember",
    )
    redis_url: RedisDsn | None = Field(
        default=None,
        description="Redis URL for persisting recent queries (optional)",
    )
    history_key: str = Field(
        default="bookresolve:recent_searches",
        description="Redis key holding the recent query list",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins for the HTTP API",
    )


@lru_cache
def get_settings() -> BookResolveSettings:
    """Get cached settings instance."""
    return BookResolveSettings()
