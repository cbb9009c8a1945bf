"""Configuration management for the adoption catalog."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote listing API
    api_url: str = "https://huachitos.cl/api/animales"
    fetch_page_size: int = Field(default=1000, ge=1)
    request_timeout: float = 30.0  # seconds

    # Client-side paging
    page_size: int = Field(default=20, ge=1)

    # Logging
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
