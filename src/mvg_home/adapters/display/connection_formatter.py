"""Formatter for connections shown on the terminal."""

import math
from datetime import datetime
from zoneinfo import ZoneInfo

from mvg_home.adapters.config.app_config import AppConfig
from mvg_home.domain.contracts.connection_formatter import ConnectionFormatterProtocol
from mvg_home.domain.models.connection import Connection
from mvg_home.domain.models.scheduled_connection import ScheduledConnection


class ConnectionFormatter(ConnectionFormatterProtocol):
    """Formatter for connections based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone settings.
        """
        self.config = config

    def minutes_until_leaving(self, scheduled: ScheduledConnection, now: datetime) -> int:
        """Minutes left until the user has to leave, rounded up."""
        return math.ceil((scheduled.leave_at - now).total_seconds() / 60)

    def format_time(self, time: datetime) -> str:
        """Format a time as HH:MM in the configured timezone."""
        return time.astimezone(ZoneInfo(self.config.timezone)).strftime("%H:%M")

    def format_first_leg(self, connection: Connection) -> str:
        """Describe how the connection starts."""
        first_leg = connection.first_leg
        if len(connection.legs) == 1:
            # Only one leg, so if it's a walk we just walk to the destination
            if first_leg.is_walking:
                return " 🏃"
            return f" {first_leg.line.transport_type.icon}{first_leg.line.label}"
        if first_leg.is_walking:
            return f" → 🏃{first_leg.destination.name}"
        return (
            f" → {first_leg.destination.name} "
            f"{first_leg.line.transport_type.icon}{first_leg.line.label}"
        )

    def format_connection(self, scheduled: ScheduledConnection, now: datetime) -> str:
        """Render a connection as a single line, e.g.

        ``🏡 In  4 min, ⚐08:12 ⚑08:40, 🚏Waldfriedhof → Harras 🚍134``
        """
        connection = scheduled.connection
        return (
            f"🏡 In {self.minutes_until_leaving(scheduled, now):>2} min, "
            f"⚐{self.format_time(connection.planned_departure_time)} "
            f"⚑{self.format_time(connection.planned_arrival_time)}, "
            f"🚏{connection.first_leg.origin.name}"
            f"{self.format_first_leg(connection)}"
        )
