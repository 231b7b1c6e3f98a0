"""Application services."""

from mvg_home.application.services.commute_service import CommuteService
from mvg_home.application.services.connection_cache import (
    MIN_CACHED_CONNECTIONS,
    WALK_TIME_FRACTION,
    ConnectionCache,
)

__all__ = [
    "MIN_CACHED_CONNECTIONS",
    "WALK_TIME_FRACTION",
    "CommuteService",
    "ConnectionCache",
]
