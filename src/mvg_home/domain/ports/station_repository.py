"""Station repository port."""

from typing import Protocol

from mvg_home.domain.models.station import Location, Station
from mvg_home.domain.models.station_lookup import StationLookup


class StationRepository(Protocol):
    """Port for resolving station names."""

    async def find_locations_by_name(self, name: str) -> list[Location]:
        """Find all locations matching a name, including unknown kinds."""
        ...

    async def lookup_station(self, name: str) -> StationLookup:
        """Look up the single station meant by a name."""
        ...

    async def find_unambiguous_station(self, name: str) -> Station:
        """Find the single station meant by a name, or raise."""
        ...
