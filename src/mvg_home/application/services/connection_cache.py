"""Connection cache: eviction, refresh and merged view of cached connections."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import datetime

from mvg_home.domain.models.cache_entry import CacheEntry
from mvg_home.domain.models.connection import Connection
from mvg_home.domain.models.desired_connection import DesiredConnection
from mvg_home.domain.models.scheduled_connection import ScheduledConnection

logger = logging.getLogger(__name__)

# A connection stays reachable while at least this fraction of the walk to
# its first stop is still ahead of us.
WALK_TIME_FRACTION = 0.5

# Entries with fewer cached connections than this are refreshed entirely.
MIN_CACHED_CONNECTIONS = 3

FetchConnections = Callable[[DesiredConnection], Awaitable[Sequence[Connection]]]


def is_reachable(connection: Connection, desired: DesiredConnection, now: datetime) -> bool:
    """Whether the user can still catch ``connection`` when leaving at ``now``."""
    departure = connection.planned_departure_time
    return now <= departure and now <= departure - desired.walk_to_start * WALK_TIME_FRACTION


def starts_with_allowed_leg(connection: Connection, desired: DesiredConnection) -> bool:
    """Whether the first leg is a ride on a line the user did not ignore."""
    first_leg = connection.first_leg
    return not first_leg.is_walking and not desired.ignores(first_leg.line.label)


@dataclass(frozen=True)
class ConnectionCache:
    """Cached connections for every desired connection, in configuration order.

    All operations return a new cache; entries are never dropped by eviction,
    only emptied, so that the next refresh fills them again.
    """

    entries: tuple[CacheEntry, ...] = ()

    @classmethod
    def from_entries(cls, entries: Iterable[CacheEntry]) -> ConnectionCache:
        return cls(entries=tuple(entries))

    @property
    def desired_connections(self) -> list[DesiredConnection]:
        return [entry.desired for entry in self.entries]

    @property
    def connection_count(self) -> int:
        """Total number of cached connections across all entries."""
        return sum(len(entry.connections) for entry in self.entries)

    def reconcile(self, configured: Sequence[DesiredConnection]) -> ConnectionCache:
        """Align the cache with the configured desired connections.

        If the cached desired connections equal ``configured`` in order, the
        cache is returned as is. Otherwise all cached connections are
        discarded and every configured connection gets an empty entry.
        """
        if self.desired_connections == list(configured):
            logger.debug("Cached configuration matches current configuration")
            return self
        logger.info("Configuration changed, discarding all cached connections")
        return ConnectionCache.from_entries(CacheEntry(desired=desired) for desired in configured)

    def _filter_connections(
        self, keep: Callable[[Connection, DesiredConnection], bool]
    ) -> ConnectionCache:
        entries = []
        for entry in self.entries:
            if entry.needs_refresh:
                entries.append(entry)
                continue
            kept = tuple(c for c in entry.connections if keep(c, entry.desired))
            entries.append(replace(entry, connections=kept))
        return ConnectionCache.from_entries(entries)

    def evict_unreachable(self, now: datetime) -> ConnectionCache:
        """Remove connections which already left or which we can no longer reach.

        Args:
            now: The time the user would leave.

        Returns:
            The cache without unreachable connections.
        """
        return self._filter_connections(lambda c, desired: is_reachable(c, desired, now))

    def evict_disallowed_first_leg(self) -> ConnectionCache:
        """Remove connections starting with a walk or with an ignored line.

        The walk to the first stop is already covered by ``walk_to_start``,
        so a connection which starts by walking gains nothing.
        """
        return self._filter_connections(starts_with_allowed_leg)

    def evict_too_few(self, limit: int) -> ConnectionCache:
        """Empty every entry holding fewer than ``limit`` connections.

        Emptied entries are refreshed completely rather than topped up.
        """
        entries = []
        for entry in self.entries:
            if not entry.needs_refresh and len(entry.connections) < limit:
                logger.debug(
                    f"Only {len(entry.connections)} connection(s) left from "
                    f"{entry.desired.start} to {entry.desired.destination}, evicting entry"
                )
                entries.append(replace(entry, connections=()))
            else:
                entries.append(entry)
        return ConnectionCache.from_entries(entries)

    async def refresh_empty(self, fetch: FetchConnections) -> ConnectionCache:
        """Fetch connections for every entry which needs a refresh.

        Fetches run concurrently. Entries which still hold connections are
        passed through and ``fetch`` is never called for them.

        Args:
            fetch: Coroutine function returning connections for a desired connection.

        Returns:
            The cache with refreshed entries.

        Raises:
            Exception: The first exception raised by any ``fetch`` call.
        """
        stale = [entry for entry in self.entries if entry.needs_refresh]
        if not stale:
            logger.info("All entries served from cache")
            return self

        logger.info(f"Refreshing {len(stale)} of {len(self.entries)} entries")
        results = await asyncio.gather(*(fetch(entry.desired) for entry in stale))
        refreshed = iter(results)

        entries = []
        for entry in self.entries:
            if entry.needs_refresh:
                entries.append(replace(entry, connections=tuple(next(refreshed))))
            else:
                entries.append(entry)
        return ConnectionCache.from_entries(entries)

    def all_connections(self) -> list[ScheduledConnection]:
        """All cached connections, ordered by the time the user has to leave.

        Connections starting with an ignored line are left out even if no
        eviction ran before. Connections with the same leave time keep their
        entry order.
        """
        scheduled = [
            ScheduledConnection(walk_to_start=entry.desired.walk_to_start, connection=connection)
            for entry in self.entries
            for connection in entry.connections
            if not entry.desired.ignores(connection.first_leg.line.label)
        ]
        scheduled.sort(key=lambda s: s.leave_at)
        return scheduled
