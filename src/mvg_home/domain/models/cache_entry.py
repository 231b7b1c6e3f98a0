"""Cache entry domain model."""

from dataclasses import dataclass

from mvg_home.domain.models.connection import Connection
from mvg_home.domain.models.desired_connection import DesiredConnection


@dataclass(frozen=True)
class CacheEntry:
    """Connections believed relevant for one desired connection.

    An empty tuple of connections means the entry needs a refresh; it does
    not mean that no connections exist.
    """

    desired: DesiredConnection
    connections: tuple[Connection, ...] = ()

    @property
    def needs_refresh(self) -> bool:
        return not self.connections
