"""MVG connection repository adapter."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from mvg_home.adapters.mvg_api.constants import MVG_CONNECTION_PATH, MVG_TRANSPORT_TYPES
from mvg_home.adapters.mvg_api.response_parser import parse_connections
from mvg_home.domain.errors import MvgApiError
from mvg_home.domain.models.connection import Connection
from mvg_home.domain.models.station import Station
from mvg_home.domain.ports.connection_repository import ConnectionRepository

if TYPE_CHECKING:
    from mvg_home.adapters.mvg_api.http_client import MvgHttpClient

logger = logging.getLogger(__name__)


def format_routing_time(departure: datetime) -> str:
    """Format a time the way the routing API expects it, e.g. ``2023-10-10T07:00:00.000Z``."""
    return departure.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MvgConnectionRepository(ConnectionRepository):
    """Adapter for retrieving connections from the MVG API."""

    def __init__(self, http_client: "MvgHttpClient") -> None:
        """Initialize with an MVG HTTP client."""
        self._http_client = http_client

    async def get_connections(
        self,
        origin: Station,
        destination: Station,
        departure: datetime,
    ) -> list[Connection]:
        """Get connections from origin to destination departing after ``departure``."""
        logger.info(
            f"Fetching connections between station {origin.name} ({origin.global_id}) and "
            f"station {destination.name} ({destination.global_id}) starting at {departure}"
        )
        params = {
            "originStationGlobalId": origin.global_id,
            "destinationStationGlobalId": destination.global_id,
            "routingDateTime": format_routing_time(departure),
            "routingDateTimeIsArrival": "false",
            "transportTypes": MVG_TRANSPORT_TYPES,
        }
        data = await self._http_client.get_json(MVG_CONNECTION_PATH, params)
        try:
            connections = parse_connections(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MvgApiError(
                f"Failed to parse response for connection from {origin.global_id} "
                f"to {destination.global_id}: {e}"
            ) from e
        logger.info(f"Received {len(connections)} connections")
        return connections
