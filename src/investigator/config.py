"""Configuration management for Investigator Sheet using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="INVESTIGATOR_",
        extra="ignore",
        populate_by_name=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Storage
    storage_backend: Literal["spreadsheet", "local"] = Field(
        default="spreadsheet", description="Where character documents are persisted"
    )
    api_url: str | None = Field(
        default=None, description="Spreadsheet web app endpoint (list/save/delete)"
    )
    request_timeout: float = Field(
        default=15.0, description="Timeout in seconds for spreadsheet requests"
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/investigator.db",
        description="Database connection URL for the local store",
        alias="DATABASE_URL",
    )

    # Character creation
    occupation_point_budget: int = Field(
        default=300, description="Default occupation skill point budget"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level", alias="LOG_LEVEL")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log format (console or json)", alias="LOG_FORMAT"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
