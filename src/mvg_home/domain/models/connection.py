"""Connection domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TransportType(str, Enum):
    """Transport types known to the MVG routing API."""

    SCHIFF = "SCHIFF"
    RUFTAXI = "RUFTAXI"
    BAHN = "BAHN"
    UBAHN = "UBAHN"
    TRAM = "TRAM"
    SBAHN = "SBAHN"
    BUS = "BUS"
    REGIONAL_BUS = "REGIONAL_BUS"
    PEDESTRIAN = "PEDESTRIAN"

    @property
    def icon(self) -> str:
        """Emoji shown in front of line labels."""
        return _TRANSPORT_ICONS[self]


_TRANSPORT_ICONS = {
    TransportType.BAHN: "🚆",
    TransportType.SBAHN: "🚆",
    TransportType.UBAHN: "🚇",
    TransportType.TRAM: "🚊",
    TransportType.BUS: "🚍",
    TransportType.REGIONAL_BUS: "🚍",
    TransportType.SCHIFF: "🛳",
    TransportType.RUFTAXI: "🚖",
    TransportType.PEDESTRIAN: "🚶",
}


@dataclass(frozen=True)
class Place:
    """A stop along a connection, with its planned time."""

    name: str
    planned_departure: datetime


@dataclass(frozen=True)
class Line:
    """The line a leg travels on."""

    label: str  # e.g., "U3", "S8", "139"
    transport_type: TransportType


@dataclass(frozen=True)
class Leg:
    """One part of a connection, either a ride on a line or a walk."""

    origin: Place
    destination: Place
    line: Line

    @property
    def departure_time(self) -> datetime:
        return self.origin.planned_departure

    @property
    def arrival_time(self) -> datetime:
        return self.destination.planned_departure

    @property
    def is_walking(self) -> bool:
        return self.line.transport_type is TransportType.PEDESTRIAN


@dataclass(frozen=True)
class Connection:
    """A single routing result between two stations.

    A connection always consists of at least one leg; constructing one
    without legs raises ``ValueError``.
    """

    legs: tuple[Leg, ...]

    def __post_init__(self) -> None:
        if not self.legs:
            raise ValueError("Connection without at least one leg makes no sense at all")

    @property
    def first_leg(self) -> Leg:
        return self.legs[0]

    @property
    def last_leg(self) -> Leg:
        return self.legs[-1]

    @property
    def planned_departure_time(self) -> datetime:
        """Planned departure at the first stop."""
        return self.first_leg.departure_time

    @property
    def planned_arrival_time(self) -> datetime:
        """Planned arrival at the last stop."""
        return self.last_leg.arrival_time
