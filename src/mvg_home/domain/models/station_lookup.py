"""Result of looking up a station by name."""

from dataclasses import dataclass

from mvg_home.domain.models.station import Station


@dataclass(frozen=True)
class Found:
    """Exactly one station matches the name."""

    station: Station


@dataclass(frozen=True)
class Ambiguous:
    """Several stations match the name, and none of them matches it exactly."""

    name: str
    candidates: tuple[Station, ...]


@dataclass(frozen=True)
class NotFound:
    """No station matches the name."""

    name: str


StationLookup = Found | Ambiguous | NotFound


def select_station(name: str, stations: list[Station]) -> StationLookup:
    """Pick the single station meant by ``name`` among search results.

    If the search returned more than one station, prefer the one whose name
    matches ``name`` exactly.
    """
    if not stations:
        return NotFound(name=name)
    if len(stations) == 1:
        return Found(station=stations[0])
    for station in stations:
        if station.name == name:
            return Found(station=station)
    return Ambiguous(name=name, candidates=tuple(stations))
