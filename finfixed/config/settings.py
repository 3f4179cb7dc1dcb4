"""Configuration management for FinFixed.

Loads the YAML configuration file into typed settings for the financials API client.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field, field_validator

from finfixed.core.config import settings

DEFAULT_API_BASE = "https://finfixed-backend.onrender.com"


class ApiSettings(BaseModel):
    """Financial data API configuration."""

    base_url: str = Field(default=DEFAULT_API_BASE, description="Base URL of the financials API")
    timeout_seconds: float = Field(default=15.0, gt=0, description="Per-request timeout")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended with a single slash."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    def financials_url(self, symbol: str) -> str:
        """URL of the financials endpoint for ``symbol`` (uppercased, not encoded)."""
        return f"{self.base_url}/financials/{symbol.upper()}"


class Config(BaseModel):
    """Root configuration model."""

    api: ApiSettings = Field(default_factory=ApiSettings)


def load_config(config_path: Path | None = None, api_base: str | None = None) -> Config:
    """Load configuration from YAML file.

    When no path is given and ``settings.config_path`` does not exist
    (e.g. in an installed package), the built-in defaults are used.

    Args:
        config_path: Path to config.yaml file (defaults to ``settings.config_path``)
        api_base: Base URL override (defaults to ``settings.api_base``)

    Returns:
        Parsed configuration object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        yaml.YAMLError: If config file is malformed
    """
    explicit = config_path is not None
    config_path = config_path or settings.config_path

    raw_config: dict[str, Any] = {}
    if config_path.exists():
        logger.info(f"Loading configuration from {config_path}")
        with config_path.open("r") as f:
            raw_config = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    else:
        logger.warning(f"No configuration file at {config_path}, using defaults")

    api_base = api_base or settings.api_base
    if api_base:
        logger.debug(f"Overriding API base URL with {api_base}")
        raw_config["api"] = {**(raw_config.get("api") or {}), "base_url": api_base}

    config = Config(**raw_config)
    logger.debug(f"API base URL: {config.api.base_url}")

    return config
