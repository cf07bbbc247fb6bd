"""API configuration via environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from airport_catalog_core import DEFAULT_MAX_PAGE_SIZE, DEFAULT_PARALLEL_THRESHOLD


class ApiSettings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    catalog_path: Path = Path("airports.csv")

    # Query limits
    max_page_size: int = Field(default=DEFAULT_MAX_PAGE_SIZE, ge=1)
    # Unlimited by default; set to reject longer search queries with a 400.
    max_query_length: int | None = Field(default=None, ge=1)

    # Search fan-out (None = one worker per CPU)
    search_workers: int | None = Field(default=None, ge=1)
    parallel_threshold: int = Field(default=DEFAULT_PARALLEL_THRESHOLD, ge=0)

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_prefix="AIRPORTS_", env_file=".env", extra="ignore"
    )


settings = ApiSettings()
