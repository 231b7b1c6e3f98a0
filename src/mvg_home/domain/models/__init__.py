"""Domain models for MVG home connections."""

from mvg_home.domain.models.cache_entry import CacheEntry
from mvg_home.domain.models.connection import Connection, Leg, Line, Place, TransportType
from mvg_home.domain.models.desired_connection import DesiredConnection
from mvg_home.domain.models.scheduled_connection import ScheduledConnection
from mvg_home.domain.models.station import Location, Station, UnknownLocation
from mvg_home.domain.models.station_lookup import (
    Ambiguous,
    Found,
    NotFound,
    StationLookup,
    select_station,
)

__all__ = [
    "Ambiguous",
    "CacheEntry",
    "Connection",
    "DesiredConnection",
    "Found",
    "Leg",
    "Line",
    "Location",
    "NotFound",
    "Place",
    "ScheduledConnection",
    "Station",
    "StationLookup",
    "TransportType",
    "UnknownLocation",
    "select_station",
]
