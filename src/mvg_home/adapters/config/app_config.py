"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mvg_home.adapters.config.paths import default_cache_file, default_config_file
from mvg_home.domain.errors import ConfigurationError


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Every field can be overridden with an ``MVG_HOME_`` prefixed environment
    variable, e.g. ``MVG_HOME_LOG_LEVEL=debug``.
    """

    model_config = SettingsConfigDict(
        env_prefix="MVG_HOME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Files
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with desired connections (default: XDG config dir)",
    )
    cache_file: str | None = Field(
        default=None,
        description="Path to the connection cache file (default: XDG cache dir)",
    )

    # MVG API configuration
    mvg_api_base_url: str = Field(
        default="https://www.mvg.de/api/fib/v2/",
        description="Base URL of the MVG routing API",
    )
    mvg_api_timeout: int = Field(default=10, description="Timeout for MVG API requests in seconds")
    user_agent: str = Field(default="home", description="User agent sent to the MVG API")

    # Display configuration
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone for displaying connection times (IANA timezone name)",
    )

    # Logging configuration
    log_level: str = Field(default="ERROR", description="Log level: DEBUG, INFO, WARNING or ERROR")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got {v!r}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging levels."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @property
    def config_path(self) -> Path:
        return Path(self.config_file) if self.config_file else default_config_file()

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_file) if self.cache_file else default_cache_file()

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML configuration file."""
        config_path = self.config_path
        try:
            with open(config_path, "rb") as f:
                return tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {config_path}") from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file from {config_path}: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f"Failed to parse configuration from {config_path}: {e}"
            ) from e

    def get_connections_config(self) -> list[dict[str, Any]]:
        """Parse and return the desired connections as a list of dicts from the TOML file.

        Raises:
            ConfigurationError: If the file is missing, unparseable, or
                ``connections`` is not a list of tables.
        """
        toml_data = self._load_toml_data()

        connections = toml_data.get("connections", [])
        if not isinstance(connections, list):
            raise ConfigurationError("TOML config 'connections' must be a list of tables")
        return connections
