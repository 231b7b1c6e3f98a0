"""Desired connection configuration loader."""

from typing import Any

from mvg_home.adapters.config.app_config import AppConfig
from mvg_home.adapters.config.duration import parse_duration
from mvg_home.domain.errors import ConfigurationError
from mvg_home.domain.models.desired_connection import DesiredConnection


class ConnectionConfigurationLoader:
    """Loads desired connections from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[DesiredConnection]:
        """Load desired connections from app config, in file order."""
        connections_data = config.get_connections_config()
        return [
            ConnectionConfigurationLoader.parse(connection_data, index)
            for index, connection_data in enumerate(connections_data)
        ]

    @staticmethod
    def parse(connection_data: Any, index: int = 0) -> DesiredConnection:
        """Parse a single ``[[connections]]`` table.

        Raises:
            ConfigurationError: If a required field is missing or has the wrong type.
        """
        where = f"connections[{index}]"
        if not isinstance(connection_data, dict):
            raise ConfigurationError(f"{where} must be a table")

        start = connection_data.get("start")
        destination = connection_data.get("destination")
        walk_to_start = connection_data.get("walk_to_start")
        ignore_starting_with = connection_data.get("ignore_starting_with", [])

        for field_name, value in (("start", start), ("destination", destination)):
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"{where}.{field_name} must be a non-empty string")

        if not isinstance(walk_to_start, str):
            raise ConfigurationError(f"{where}.walk_to_start must be a duration like \"5m\"")
        try:
            walk_duration = parse_duration(walk_to_start)
        except ValueError as e:
            raise ConfigurationError(f"{where}.walk_to_start: {e}") from e

        if not isinstance(ignore_starting_with, list):
            raise ConfigurationError(f"{where}.ignore_starting_with must be a list of line labels")
        for item in ignore_starting_with:
            # Line labels like 12 or 947 may be written as integers
            if isinstance(item, bool) or not isinstance(item, (str, int)):
                raise ConfigurationError(
                    f"{where}.ignore_starting_with must contain line labels, got {item!r}"
                )
        labels = frozenset(str(item) for item in ignore_starting_with)

        return DesiredConnection(
            start=start,
            destination=destination,
            walk_to_start=walk_duration,
            ignore_starting_with=labels,
        )
