"""Cache manager orchestration service.

ONLY cache orchestration - high-level API the business services use for
read-through caching and mutation-driven invalidation.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from ...core.protocols import Fetcher
from ...core.value_objects.cache_ttl import TTLLike

if TYPE_CHECKING:
    from ...infrastructure.repositories.memory_cache_store import MemoryCacheStore

logger = logging.getLogger(__name__)


class CacheManager:
    """Cache manager orchestration service.

    High-level cache service on top of a MemoryCacheStore:
    - Prefix/params keyed access with deterministic key generation
    - Read-through ``get_or_fetch`` for async loaders
    - Prefix and multi-pattern invalidation after writes

    ``None`` is reserved to mean "not cached": a fetcher returning None is
    not stored, while any other value (including an empty list) is.
    """

    def __init__(self, store: "MemoryCacheStore"):
        """Initialize cache manager.

        Args:
            store: Cache store shared by the application
        """
        self._store = store

    @property
    def store(self) -> "MemoryCacheStore":
        return self._store

    # Keyed by prefix and params

    def get_for(self, prefix: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Get the value cached for prefix and params, None on a miss."""
        return self._store.get(self._store.generate_key(prefix, params))

    def set_for(
        self,
        prefix: str,
        params: Optional[Mapping[str, Any]],
        data: Any,
        ttl: Optional[TTLLike] = None,
        tags: Optional[Iterable[str]] = None,
    ) -> str:
        """Cache data for prefix and params.

        Returns:
            Generated cache key
        """
        key = self._store.generate_key(prefix, params)
        self._store.set(key, data, ttl=ttl, tags=tags)
        return key

    # Read-through

    async def get_or_fetch(
        self,
        key: str,
        fetcher: Fetcher,
        ttl: Optional[TTLLike] = None,
        tags: Optional[Iterable[str]] = None,
        force_refresh: bool = False,
    ) -> Any:
        """Get cached value or load it with fetcher.

        Common cache pattern - check cache, on a miss await the fetcher and
        cache its result.

        Args:
            key: Cache key
            fetcher: Coroutine function loading fresh data
            ttl: TTL for a freshly fetched value
            tags: Tags for a freshly fetched value
            force_refresh: Skip the cache lookup and always fetch

        Returns:
            Cached or fetched value

        Raises:
            Whatever the fetcher raises; nothing is cached in that case
        """
        if not force_refresh:
            cached = self._store.get(key)
            if cached is not None:
                return cached

        data = await fetcher()

        if data is None:
            logger.debug("Fetcher returned None for %s, not caching", key)
            return None

        self._store.set(key, data, ttl=ttl, tags=tags)
        return data

    async def get_or_fetch_for(
        self,
        prefix: str,
        params: Optional[Mapping[str, Any]],
        fetcher: Fetcher,
        ttl: Optional[TTLLike] = None,
        tags: Optional[Iterable[str]] = None,
        force_refresh: bool = False,
    ) -> Any:
        """Read-through keyed by prefix and params."""
        key = self._store.generate_key(prefix, params)
        return await self.get_or_fetch(
            key, fetcher, ttl=ttl, tags=tags, force_refresh=force_refresh
        )

    # Invalidation

    def invalidate_prefix(self, prefix: str) -> int:
        """Drop every key containing ``prefix:``."""
        return self._store.invalidate(pattern=f"{prefix}:")

    def invalidate_tags(self, *tags: str) -> int:
        return self._store.invalidate(tags=tags)

    def invalidate_many(self, patterns: Iterable[str]) -> int:
        """Invalidate several substring patterns.

        Returns:
            Total number of entries removed
        """
        removed = 0
        for pattern in patterns:
            removed += self._store.invalidate(pattern=pattern)
        return removed


def create_cache_manager(store: "MemoryCacheStore") -> CacheManager:
    """Create cache manager with dependencies."""
    return CacheManager(store=store)
