"""
Application settings.

Loads configuration from a JSON config file and environment variables
using pydantic-settings. Settings are built once at startup and passed
to the components that need them.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from yarl import URL

from gateway.config.constants import DEFAULT_PROCESSING_DELAY_SECONDS
from gateway.utils.exceptions import ConfigError


DEFAULT_CONFIG_FILE = "config.json"


class Settings(BaseSettings):
    """Gateway settings."""

    # HTTP server
    address: str = "http://localhost:8082/"

    # Authorization service
    auth_endpoint: str = "http://localhost:8081/"
    auth_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Total timeout for one auth request"
    )

    # Withdrawals
    processing_delay_seconds: float = Field(
        default=DEFAULT_PROCESSING_DELAY_SECONDS,
        ge=0,
        description="Simulated processing time for completed withdrawals",
    )

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/gateway.log"

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("address", "auth_endpoint")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        url = URL(v)
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"expected an absolute http(s) URL, got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level name."""
        level = v.upper()
        if level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def bind_host(self) -> str:
        """Host part of the bind address."""
        return URL(self.address).host or "localhost"

    @property
    def bind_port(self) -> int:
        """Port part of the bind address (scheme default if omitted)."""
        return URL(self.address).port or 80

    def auth_url(self, path: str) -> str:
        """
        Build an authorization service URL for a fixed path.

        Args:
            path: Absolute path such as "/issue-accesskeys"

        Returns:
            Full URL string
        """
        base = self.auth_endpoint.rstrip("/")
        return f"{base}{path}"


def default_config() -> dict[str, Any]:
    """Config document with every field at its default value."""
    return {name: field.default for name, field in Settings.model_fields.items()}


def write_default_config(path: Path) -> None:
    """
    Write the default config document to ``path``.

    Args:
        path: Target config file
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(default_config(), indent=2) + "\n", encoding="utf-8")
    logger.info(f"Default config written to {path}")


def load_settings(path: Path | str = DEFAULT_CONFIG_FILE) -> Settings:
    """
    Load settings from a JSON config file.

    The file is created with default values if it does not exist. Keys
    missing from the file fall back to environment variables, then to
    defaults.

    Args:
        path: Config file path

    Returns:
        Settings instance

    Raises:
        ConfigError: If the file is unreadable or holds invalid values
    """
    path = Path(path)
    if not path.exists():
        write_default_config(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"could not read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must hold a JSON object")

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid config file {path}: {e}") from e
