"""Ports (interfaces) for the ports-and-adapters architecture."""

from mvg_home.domain.ports.connection_repository import ConnectionRepository
from mvg_home.domain.ports.station_repository import StationRepository

__all__ = [
    "ConnectionRepository",
    "StationRepository",
]
