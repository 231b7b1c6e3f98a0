"""Desired connection domain model."""

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass(frozen=True)
class DesiredConnection:
    """A connection the user wants to take, as written in the config file."""

    start: str  # Name of the start station (e.g., "Waldfriedhof")
    destination: str  # Name of the destination station
    walk_to_start: timedelta  # Time to account for walking to the start station
    ignore_starting_with: frozenset[str] = field(
        default_factory=frozenset
    )  # Line labels (e.g., "S2", "12", "947") which must not start a connection

    def ignores(self, line_label: str) -> bool:
        """Whether connections starting with the given line label are unwanted."""
        return line_label in self.ignore_starting_with
