"""Station and location domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a public transport station."""

    global_id: str  # e.g., "de:09162:6"
    name: str


@dataclass(frozen=True)
class UnknownLocation:
    """A location of a kind this application does not handle (address, POI, ...)."""

    type: str


Location = Station | UnknownLocation
