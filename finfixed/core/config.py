"""Application settings using Pydantic V2."""

import sys
from pathlib import Path

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-level settings.

    Values are read from ``FINFIXED_*`` environment variables or a local ``.env``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINFIXED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="finfixed", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Project paths
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)
    config_path: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent.parent / "config" / "config.yaml",
        description="Path to the YAML configuration file",
    )

    # Overrides the base URL from the YAML config when set
    api_base: str | None = Field(default=None, description="Financial data API base URL")


def setup_logging(level: str) -> None:
    """Replace loguru's default sink with a single stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


# Singleton instance
settings = Settings()
