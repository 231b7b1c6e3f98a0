"""Parsing of MVG API responses into domain models."""

import logging
from datetime import datetime
from typing import Any

from mvg_home.domain.models.connection import Connection, Leg, Line, Place, TransportType
from mvg_home.domain.models.station import Location, Station, UnknownLocation

logger = logging.getLogger(__name__)


def _require_dict(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Expected {what} to be an object, got {type(data).__name__}")
    return data


def parse_location(data: Any) -> Location:
    """Parse a location from the ``location`` endpoint.

    Only stations are of interest; every other kind (addresses, points of
    interest, and whatever MVG adds in future) becomes an ``UnknownLocation``.
    """
    data = _require_dict(data, "location")
    location_type = str(data.get("type", ""))
    if location_type == "STATION":
        return Station(global_id=data["globalId"], name=data["name"])
    return UnknownLocation(type=location_type)


def parse_locations(data: Any) -> list[Location]:
    """Parse the list returned by the ``location`` endpoint."""
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of locations, got {type(data).__name__}")
    return [parse_location(item) for item in data]


def _parse_place(data: Any) -> Place:
    data = _require_dict(data, "place")
    planned_departure = datetime.fromisoformat(data["plannedDeparture"])
    if planned_departure.tzinfo is None:
        raise ValueError(f"Planned departure without UTC offset: {data['plannedDeparture']}")
    return Place(name=data["name"], planned_departure=planned_departure)


def _parse_leg(data: Any) -> Leg:
    data = _require_dict(data, "connection part")
    line = _require_dict(data["line"], "line")
    return Leg(
        origin=_parse_place(data["from"]),
        destination=_parse_place(data["to"]),
        line=Line(
            label=str(line.get("label", "")),
            transport_type=TransportType(line["transportType"]),
        ),
    )


def parse_connection(data: Any) -> Connection:
    """Parse a single connection from the ``connection`` endpoint.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If a field has an invalid value or the connection has no parts.
    """
    data = _require_dict(data, "connection")
    return Connection(legs=tuple(_parse_leg(part) for part in data["parts"]))


def parse_connections(data: Any) -> list[Connection]:
    """Parse the list returned by the ``connection`` endpoint."""
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of connections, got {type(data).__name__}")
    return [parse_connection(item) for item in data]
