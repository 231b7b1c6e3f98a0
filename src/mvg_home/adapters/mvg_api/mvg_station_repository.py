"""MVG station repository adapter."""

import logging
from typing import TYPE_CHECKING

from mvg_home.adapters.mvg_api.constants import MVG_LOCATION_PATH
from mvg_home.adapters.mvg_api.response_parser import parse_locations
from mvg_home.domain.errors import AmbiguousStationError, MvgApiError, StationNotFoundError
from mvg_home.domain.models.station import Location, Station, UnknownLocation
from mvg_home.domain.models.station_lookup import (
    Ambiguous,
    Found,
    NotFound,
    StationLookup,
    select_station,
)
from mvg_home.domain.ports.station_repository import StationRepository

if TYPE_CHECKING:
    from mvg_home.adapters.mvg_api.http_client import MvgHttpClient

logger = logging.getLogger(__name__)


class MvgStationRepository(StationRepository):
    """Adapter for resolving station names with the MVG API."""

    def __init__(self, http_client: "MvgHttpClient") -> None:
        """Initialize with an MVG HTTP client."""
        self._http_client = http_client

    async def find_locations_by_name(self, name: str) -> list[Location]:
        """Find all locations matching a name."""
        logger.info(f"Finding locations for {name}")
        data = await self._http_client.get_json(MVG_LOCATION_PATH, {"query": name})
        try:
            locations = parse_locations(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MvgApiError(f"Failed to parse response for location by name {name}: {e}") from e
        logger.info(f"Received {len(locations)} locations for {name}")
        return locations

    async def lookup_station(self, name: str) -> StationLookup:
        """Look up the single station meant by a name."""
        stations: list[Station] = []
        for location in await self.find_locations_by_name(name):
            if isinstance(location, UnknownLocation):
                logger.debug(f"Skipping over unknown location type {location.type} in response")
                continue
            stations.append(location)
        return select_station(name, stations)

    async def find_unambiguous_station(self, name: str) -> Station:
        """Find the single station meant by a name.

        Raises:
            StationNotFoundError: If no station matches.
            AmbiguousStationError: If several stations match and none exactly.
        """
        match await self.lookup_station(name):
            case Found(station=station):
                logger.info(
                    f"Found station with name {station.name} and id {station.global_id} for {name}"
                )
                return station
            case Ambiguous(candidates=candidates):
                raise AmbiguousStationError(name, candidates)
            case NotFound():
                raise StationNotFoundError(name)
