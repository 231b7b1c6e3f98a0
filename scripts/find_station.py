#!/usr/bin/env python3
"""Helper script to find MVG stations matching a name."""

import asyncio
import sys

from mvg_home.adapters.config import AppConfig
from mvg_home.adapters.mvg_api import MvgHttpClient, MvgStationRepository, create_session
from mvg_home.domain.models import Ambiguous, Found, NotFound, Station


def _print_station_info(station: Station) -> None:
    """Print station information."""
    print(f"  ID: {station.global_id}")
    print(f"  Name: {station.name}")


async def find_station(name: str) -> None:
    """Find a station by name and show how the name resolves."""
    print(f"Searching for: {name}")

    config = AppConfig()
    async with create_session(config) as session:
        repository = MvgStationRepository(MvgHttpClient(session, config.mvg_api_base_url))
        lookup = await repository.lookup_station(name)

    match lookup:
        case Found(station=station):
            print("\nFound station:")
            _print_station_info(station)
        case Ambiguous(candidates=candidates):
            print(f"\n{len(candidates)} candidates, none named exactly {name!r}:")
            for station in candidates:
                _print_station_info(station)
            sys.exit(1)
        case NotFound():
            print(f"Station not found: {name}")
            sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python find_station.py <station_name>")
        print('Example: python find_station.py "Schwanthaler Höhe"')
        sys.exit(1)

    asyncio.run(find_station(sys.argv[1]))
