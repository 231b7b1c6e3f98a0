"""Domain layer - core models, ports and errors."""

from mvg_home.domain.errors import (
    AmbiguousStationError,
    ConfigurationError,
    MvgApiError,
    MvgHomeError,
    StationNotFoundError,
    StationResolutionError,
)
from mvg_home.domain.models import (
    CacheEntry,
    Connection,
    DesiredConnection,
    ScheduledConnection,
    Station,
)
from mvg_home.domain.ports import ConnectionRepository, StationRepository

__all__ = [
    "AmbiguousStationError",
    "CacheEntry",
    "ConfigurationError",
    "Connection",
    "ConnectionRepository",
    "DesiredConnection",
    "MvgApiError",
    "MvgHomeError",
    "ScheduledConnection",
    "Station",
    "StationNotFoundError",
    "StationRepository",
    "StationResolutionError",
]
