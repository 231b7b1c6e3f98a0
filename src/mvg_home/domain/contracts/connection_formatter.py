"""Protocol for rendering connections."""

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mvg_home.domain.models.scheduled_connection import ScheduledConnection


class ConnectionFormatterProtocol(Protocol):
    """Protocol for rendering a scheduled connection as a single line."""

    def format_connection(self, scheduled: "ScheduledConnection", now: datetime) -> str:
        """Render a connection relative to ``now``."""
        ...
