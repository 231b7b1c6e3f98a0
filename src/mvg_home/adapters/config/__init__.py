"""Configuration adapters."""

from mvg_home.adapters.config.app_config import AppConfig
from mvg_home.adapters.config.connection_configuration_loader import (
    ConnectionConfigurationLoader,
)
from mvg_home.adapters.config.duration import parse_duration

__all__ = ["AppConfig", "ConnectionConfigurationLoader", "parse_duration"]
