"""Protocol for persisting cached connections."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mvg_home.domain.models.cache_entry import CacheEntry


class ConnectionCacheStoreProtocol(Protocol):
    """Protocol for loading and saving cache entries."""

    def load(self) -> list["CacheEntry"]:
        """Load cache entries.

        Returns:
            The stored entries.

        Raises:
            OSError: If the stored entries cannot be read.
            ValueError: If the stored entries cannot be decoded.
        """
        ...

    def save(self, entries: Sequence["CacheEntry"]) -> None:
        """Replace the stored entries.

        Args:
            entries: The entries to store.
        """
        ...
