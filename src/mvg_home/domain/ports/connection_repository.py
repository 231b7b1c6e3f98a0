"""Connection repository port."""

from datetime import datetime
from typing import Protocol

from mvg_home.domain.models.connection import Connection
from mvg_home.domain.models.station import Station


class ConnectionRepository(Protocol):
    """Port for retrieving connections between two stations."""

    async def get_connections(
        self,
        origin: Station,
        destination: Station,
        departure: datetime,
    ) -> list[Connection]:
        """Get connections from origin to destination departing after the given time."""
        ...
