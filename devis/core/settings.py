"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")
    log_file: str = Field(default="logs/devis.log", description="Rotating log file, empty to disable")

    # Persistence
    projects_dir: str = Field(default="projects", description="Directory of saved project documents")

    # Defaults applied when creating entities
    default_ceiling_height: float = Field(default=2.5, ge=0, description="Ceiling height of a new property (m)")
    default_tva_rate: float = Field(default=10.0, ge=0, le=100, description="VAT rate of a new work item (%)")
    default_unite: str = Field(default="M²", description="Unit of a new work item")

    model_config = {
        "env_prefix": "DEVIS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
