"""Cache persistence adapters."""

from mvg_home.adapters.cache.file_connection_cache_store import (
    FileConnectionCacheStore,
    decode_entries,
    encode_entries,
)

__all__ = ["FileConnectionCacheStore", "decode_entries", "encode_entries"]
