"""Exceptions raised by MVG home."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mvg_home.domain.models.station import Station


class MvgHomeError(Exception):
    """Base class for all errors reported to the user."""


class ConfigurationError(MvgHomeError):
    """Raised when the configuration file is missing or invalid."""


class StationResolutionError(MvgHomeError):
    """Raised when a station name cannot be resolved to a single station."""


class StationNotFoundError(StationResolutionError):
    """Raised when no station matches a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No matches for {name}")
        self.name = name


class AmbiguousStationError(StationResolutionError):
    """Raised when several stations match a name and none matches exactly."""

    def __init__(self, name: str, candidates: tuple[Station, ...]) -> None:
        names = ", ".join(candidate.name for candidate in candidates)
        super().__init__(f"Ambiguous results for {name}: {names}")
        self.name = name
        self.candidates = candidates


class MvgApiError(MvgHomeError):
    """Raised when the MVG API fails or returns something we cannot parse."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "AmbiguousStationError",
    "ConfigurationError",
    "MvgApiError",
    "MvgHomeError",
    "StationNotFoundError",
    "StationResolutionError",
]
