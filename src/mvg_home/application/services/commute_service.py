"""Commute service: the cache pipeline run on every invocation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime

from mvg_home.application.services.connection_cache import (
    MIN_CACHED_CONNECTIONS,
    ConnectionCache,
)
from mvg_home.domain.contracts.connection_cache_store import ConnectionCacheStoreProtocol
from mvg_home.domain.models.connection import Connection
from mvg_home.domain.models.desired_connection import DesiredConnection
from mvg_home.domain.models.scheduled_connection import ScheduledConnection
from mvg_home.domain.ports.connection_repository import ConnectionRepository
from mvg_home.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class CommuteService:
    """Service for finding the next connections home."""

    def __init__(
        self,
        station_repository: StationRepository,
        connection_repository: ConnectionRepository,
        cache_store: ConnectionCacheStoreProtocol,
    ) -> None:
        """Initialize with repositories and a cache store."""
        self._station_repository = station_repository
        self._connection_repository = connection_repository
        self._cache_store = cache_store

    def load_cache(self, fresh: bool = False) -> ConnectionCache:
        """Load the cache from the store, or start empty.

        A missing or corrupt cache is not an error; we just fetch everything again.
        """
        if fresh:
            logger.debug("Cache discarded per command line arguments")
            return ConnectionCache()
        try:
            return ConnectionCache.from_entries(self._cache_store.load())
        except (OSError, ValueError) as e:
            logger.debug(f"Failed to read cached connections: {e}")
            return ConnectionCache()

    def save_cache(self, cache: ConnectionCache) -> None:
        """Save the cache to the store, logging failures."""
        logger.debug("Saving cache")
        try:
            self._cache_store.save(cache.entries)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to save cached connections: {e}")

    async def fetch_connections(
        self, desired: DesiredConnection, now: datetime
    ) -> list[Connection]:
        """Fetch connections for a desired connection, leaving at ``now``.

        Raises:
            StationResolutionError: If start or destination is not a single station.
            MvgApiError: If the MVG API fails.
        """
        start, destination = await asyncio.gather(
            self._station_repository.find_unambiguous_station(desired.start),
            self._station_repository.find_unambiguous_station(desired.destination),
        )
        departure = now + desired.walk_to_start
        return await self._connection_repository.get_connections(start, destination, departure)

    async def refresh(self, cache: ConnectionCache, now: datetime) -> ConnectionCache:
        """Evict stale connections and fetch new ones where needed."""
        cached_count = cache.connection_count
        cleared = cache.evict_unreachable(now).evict_too_few(MIN_CACHED_CONNECTIONS)
        logger.info(
            f"{cleared.connection_count} connections remained in cache after eviction, "
            f"evicted {cached_count - cleared.connection_count} connections"
        )

        refreshed = await cleared.refresh_empty(
            lambda desired: self.fetch_connections(desired, now)
        )
        # The API sometimes returns connections we cannot reach anymore once
        # the walk to the first stop is taken into account.
        return refreshed.evict_unreachable(now).evict_disallowed_first_leg()

    async def next_connections(
        self,
        configured: Sequence[DesiredConnection],
        now: datetime,
        fresh: bool = False,
        dump_cache: bool = False,
    ) -> list[ScheduledConnection]:
        """Run the whole pipeline and return connections ordered by leave time.

        Args:
            configured: Desired connections from the configuration file.
            now: The time the user wants to leave.
            fresh: Ignore the cache on disk.
            dump_cache: Show the cache as is, without evicting or refreshing.

        Returns:
            All connections, earliest leave time first.
        """
        cache = self.load_cache(fresh).reconcile(configured)
        logger.info(
            f"Found {cache.connection_count} connections in cache for current configuration"
        )

        if not dump_cache:
            cache = await self.refresh(cache, now)

        self.save_cache(cache)
        return cache.all_connections()
