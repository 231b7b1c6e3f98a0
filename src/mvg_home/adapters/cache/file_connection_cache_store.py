"""File-backed store for cached connections."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter

from mvg_home.domain.contracts.connection_cache_store import ConnectionCacheStoreProtocol
from mvg_home.domain.models.cache_entry import CacheEntry

logger = logging.getLogger(__name__)

_ENTRIES_ADAPTER = TypeAdapter(list[CacheEntry])


def encode_entries(entries: Sequence[CacheEntry]) -> bytes:
    """Serialize cache entries to JSON bytes."""
    return _ENTRIES_ADAPTER.dump_json(list(entries))


def decode_entries(data: bytes) -> list[CacheEntry]:
    """Deserialize cache entries from JSON bytes.

    Raises:
        pydantic.ValidationError: If the data does not describe cache entries.
    """
    return _ENTRIES_ADAPTER.validate_json(data)


class FileConnectionCacheStore(ConnectionCacheStoreProtocol):
    """Stores cache entries as JSON in a single file."""

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: The cache file.
        """
        self.path = path

    def load(self) -> list[CacheEntry]:
        """Load cache entries from the cache file.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file contents are not valid cache entries.
        """
        logger.debug(f"Loading cached connections from {self.path}")
        return decode_entries(self.path.read_bytes())

    def save(self, entries: Sequence[CacheEntry]) -> None:
        """Replace the cache file with the given entries.

        Readers see either the old or the new file, never a partial write.
        """
        data = encode_entries(entries)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = tempfile.NamedTemporaryFile(
            dir=self.path.parent, prefix=f".{self.path.name}.", delete=False
        )
        try:
            with tmp:
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp.name, self.path)
        except OSError:
            os.unlink(tmp.name)
            raise
        logger.debug(f"Saved {len(entries)} cache entries to {self.path}")
