"""Cache store implementations."""

from .memory_cache_store import MemoryCacheStore, create_cache_store, monotonic_ms

CacheStore = MemoryCacheStore

__all__ = ["CacheStore", "MemoryCacheStore", "create_cache_store", "monotonic_ms"]
