"""MVG API adapters."""

from mvg_home.adapters.mvg_api.http_client import MvgHttpClient, create_session
from mvg_home.adapters.mvg_api.mvg_connection_repository import MvgConnectionRepository
from mvg_home.adapters.mvg_api.mvg_station_repository import MvgStationRepository

__all__ = [
    "MvgConnectionRepository",
    "MvgHttpClient",
    "MvgStationRepository",
    "create_session",
]
