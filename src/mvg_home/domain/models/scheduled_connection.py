"""Scheduled connection domain model."""

from datetime import datetime, timedelta
from typing import NamedTuple

from mvg_home.domain.models.connection import Connection


class ScheduledConnection(NamedTuple):
    """A connection together with the walk needed to reach its first stop."""

    walk_to_start: timedelta
    connection: Connection

    @property
    def leave_at(self) -> datetime:
        """When the user has to leave to catch the connection."""
        return self.connection.planned_departure_time - self.walk_to_start
