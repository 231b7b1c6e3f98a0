"""Adapters layer - external system integrations."""

from mvg_home.adapters.cache import FileConnectionCacheStore
from mvg_home.adapters.config import AppConfig
from mvg_home.adapters.display import ConnectionFormatter
from mvg_home.adapters.mvg_api import (
    MvgConnectionRepository,
    MvgStationRepository,
)

__all__ = [
    "AppConfig",
    "ConnectionFormatter",
    "FileConnectionCacheStore",
    "MvgConnectionRepository",
    "MvgStationRepository",
]
