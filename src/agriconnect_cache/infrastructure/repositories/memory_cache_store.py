"""Memory cache store.

ONLY in-memory implementation - process-local keyed store with per-entry
TTL, lazy expiration on read, substring/tag invalidation and a periodic
sweep of expired entries.

One store is created at application bootstrap with create_cache_store()
and handed to the services that need it; tests build their own.
"""

import copy
import logging
import threading
import time
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ...application.services.event_publisher import CacheEventPublisher
from ...core.entities.cache_entry import CacheEntry, estimate_size
from ...core.events.cache_event import CacheEvent, CacheEventType
from ...core.protocols import CacheEventListener, Clock
from ...core.value_objects.cache_key import generate_key, validate_key
from ...core.value_objects.cache_metrics import CacheMetrics, CacheStats
from ...core.value_objects.cache_ttl import CacheTTL, TTLLike
from ...core.value_objects.invalidation_selector import InvalidationSelector
from ..configuration.cache_config import CacheConfig
from ..schedulers.cleanup_scheduler import CleanupScheduler

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    """Default store clock, milliseconds from time.monotonic()."""
    return time.monotonic() * 1000.0


class MemoryCacheStore:
    """Thread-safe in-memory cache store.

    Features:
    - TTL expiration, lazy on read and proactive on cleanup()
    - Substring and tag based bulk invalidation
    - Deterministic key generation from request parameters
    - Hit/miss metrics and synchronous event notification
    - Background sweep owned by the store, stopped by shutdown()

    Reads never raise for missing or expired data. Every public operation
    runs under one re-entrant lock; events are published after it is
    released, so listeners may call back into the store.

    Stored payloads are shared with the caller unless ``copy_values`` is
    enabled: callers must not mutate what they pass to set() or get back
    from get().
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Optional[Clock] = None,
        publisher: Optional[CacheEventPublisher] = None,
    ):
        """Initialize memory cache store.

        Args:
            config: Store configuration, defaults to CacheConfig()
            clock: Millisecond clock, defaults to a monotonic clock
            publisher: Event publisher, created from config when omitted
        """
        self._config = config or CacheConfig()
        self._clock = clock or monotonic_ms
        self._default_ttl = CacheTTL(self._config.default_ttl_ms)
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._metrics = CacheMetrics()
        self._publisher = publisher or CacheEventPublisher(enabled=self._config.enable_events)
        self._scheduler = CleanupScheduler(
            self.cleanup,
            interval_seconds=self._config.cleanup_interval_seconds,
        )

        if self._config.start_cleanup:
            self._scheduler.start()

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def default_ttl(self) -> CacheTTL:
        return self._default_ttl

    @property
    def is_running(self) -> bool:
        """Whether the background sweep is active."""
        return self._scheduler.is_running

    def now(self) -> float:
        """Current instant on the store clock, for ``invalidate(before=...)``."""
        return self._clock()

    # Core operations

    def get(self, key: str, default: Any = None) -> Any:
        """Return the live value for key, or ``default`` on a miss.

        An expired entry is removed and reported as a miss.
        """
        validate_key(key)
        started = time.perf_counter()
        events: List[CacheEvent] = []

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._metrics.misses += 1
                result = default
                event_type = CacheEventType.MISS
            elif entry.is_expired(self._clock()):
                del self._entries[key]
                self._metrics.expirations += 1
                self._metrics.misses += 1
                result = default
                event_type = CacheEventType.MISS
                if self._publisher.enabled:
                    events.append(CacheEvent.create(CacheEventType.EXPIRE, key))
            else:
                self._metrics.hits += 1
                result = copy.deepcopy(entry.data) if self._config.copy_values else entry.data
                event_type = CacheEventType.HIT

        if self._config.log_cache_operations:
            logger.debug("cache %s: %s", event_type.value, key)

        if self._publisher.enabled:
            duration_ms = (time.perf_counter() - started) * 1000.0
            events.append(CacheEvent.create(event_type, key, duration_ms=duration_ms))
            self._publisher.publish_all(events)

        return result

    def set(
        self,
        key: str,
        data: Any,
        ttl: Optional[TTLLike] = None,
        tags: Optional[Iterable[str]] = None,
    ) -> None:
        """Store data under key, replacing any existing entry.

        Args:
            key: Cache key
            data: Payload, stored as-is (or deep-copied with copy_values)
            ttl: Milliseconds, preset name, timedelta or CacheTTL;
                the configured default when omitted
            tags: Optional tags for invalidate(tags=...)
        """
        validate_key(key)
        resolved_ttl = self._default_ttl if ttl is None else CacheTTL.resolve(ttl)
        if isinstance(tags, str):
            tags = [tags]
        payload = copy.deepcopy(data) if self._config.copy_values else data
        size_bytes = estimate_size(data)

        with self._lock:
            self._entries[key] = CacheEntry(
                key=key,
                data=payload,
                created_at_ms=self._clock(),
                ttl=resolved_ttl,
                tags=frozenset(tags or ()),
                size_bytes=size_bytes,
            )
            self._metrics.sets += 1

        if self._config.log_cache_operations:
            logger.debug("cache set: %s (ttl=%s)", key, resolved_ttl)

        if self._publisher.enabled:
            self._publisher.publish(
                CacheEvent.create(CacheEventType.SET, key, size_bytes=size_bytes)
            )

    def delete(self, key: str) -> bool:
        """Remove key if present.

        Returns:
            True if an entry was removed, expired-but-unswept included
        """
        validate_key(key)

        with self._lock:
            removed = self._entries.pop(key, None)
            if removed is not None:
                self._metrics.deletes += 1

        if removed is not None and self._publisher.enabled:
            self._publisher.publish(CacheEvent.create(CacheEventType.DELETE, key))

        return removed is not None

    def invalidate(
        self,
        *,
        pattern: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
        before: Optional[float] = None,
        where: Optional[Callable[[str], bool]] = None,
    ) -> int:
        """Remove every entry selected by pattern, tags or key predicate.

        Args:
            pattern: Plain case-sensitive substring matched against keys
            tags: Entries sharing any of these tags are removed
            before: Only remove entries created strictly before this
                instant on the store clock (see now())
            where: Key predicate, called under the store lock; it must
                not call back into the store

        Returns:
            Number of entries removed

        Raises:
            InvalidSelectorError: No pattern, tags or predicate were given
        """
        selector = InvalidationSelector.build(
            pattern=pattern, tags=tags, before_ms=before, where=where
        )

        with self._lock:
            matched = [
                key for key, entry in self._entries.items()
                if selector.matches(key, entry.tags, entry.created_at_ms)
            ]
            for key in matched:
                del self._entries[key]
            self._metrics.invalidations += len(matched)

        if matched:
            logger.debug("Invalidated %d cache entries (%s)", len(matched), selector)
            if self._publisher.enabled:
                self._publisher.publish(
                    CacheEvent.create(CacheEventType.INVALIDATE, str(selector), count=len(matched))
                )

        return len(matched)

    def clear(self) -> None:
        """Remove every entry and reset the metrics (logout, global reset)."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            self._metrics = CacheMetrics()

        logger.info("Cache cleared (%d entries removed)", removed)

    def cleanup(self) -> int:
        """Remove every expired entry.

        Returns:
            Number of entries removed
        """
        events: List[CacheEvent] = []

        with self._lock:
            now = self._clock()
            expired_keys = [
                key for key, entry in self._entries.items() if entry.is_expired(now)
            ]
            for key in expired_keys:
                del self._entries[key]
            self._metrics.expirations += len(expired_keys)

        if expired_keys:
            logger.debug("Removed %d expired cache entries", len(expired_keys))
            if self._publisher.enabled:
                events = [CacheEvent.create(CacheEventType.EXPIRE, key) for key in expired_keys]
                self._publisher.publish_all(events)

        return len(expired_keys)

    def has(self, key: str) -> bool:
        """Check whether key holds a live entry, without touching metrics."""
        validate_key(key)
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not entry.is_expired(self._clock())

    # Keys

    def generate_key(self, prefix: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build a deterministic key, see core.value_objects.cache_key.generate_key."""
        return generate_key(prefix, params)

    # Introspection

    def get_stats(self) -> CacheStats:
        """Size and keys currently held, expired-but-unswept included.

        ``expired`` counts the entries the next sweep would remove.
        """
        with self._lock:
            now = self._clock()
            created = [entry.created_at_ms for entry in self._entries.values()]
            return CacheStats(
                size=len(self._entries),
                keys=list(self._entries),
                expired=sum(1 for entry in self._entries.values() if entry.is_expired(now)),
                oldest_entry_ms=min(created, default=None),
                newest_entry_ms=max(created, default=None),
            )

    def get_metrics(self) -> CacheMetrics:
        """Snapshot of the activity counters."""
        with self._lock:
            return replace(self._metrics)

    def reset_metrics(self) -> None:
        with self._lock:
            self._metrics = CacheMetrics()

    def get_entry_info(self, key: str) -> Optional[Dict[str, Any]]:
        """Bookkeeping for one entry, without its payload."""
        validate_key(key)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            now = self._clock()
            return {
                "key": entry.key,
                "ttl_ms": entry.ttl.milliseconds,
                "age_ms": entry.age_ms(now),
                "time_until_expiry_ms": entry.time_until_expiry_ms(now),
                "expired": entry.is_expired(now),
                "tags": sorted(entry.tags),
                "size_bytes": entry.size_bytes,
            }

    # Events

    def subscribe(self, listener: CacheEventListener):
        """Register an event listener; returns an unsubscribe callable."""
        return self._publisher.subscribe(listener)

    def unsubscribe(self, listener: CacheEventListener) -> None:
        self._publisher.unsubscribe(listener)

    # Lifecycle

    def start_cleanup(self) -> None:
        """Start the background sweep if it is not running."""
        self._scheduler.start()

    def shutdown(self) -> None:
        """Stop the background sweep. Entries stay readable."""
        self._scheduler.stop()

    def __enter__(self) -> "MemoryCacheStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(key) and self.has(key)


def create_cache_store(
    config: Optional[CacheConfig] = None,
    clock: Optional[Clock] = None,
    publisher: Optional[CacheEventPublisher] = None,
) -> MemoryCacheStore:
    """Create the process cache store.

    Args:
        config: Store configuration, defaults to CacheConfig()
        clock: Millisecond clock override, mainly for tests
        publisher: Event publisher override

    Returns:
        Configured memory cache store, with its sweep started unless
        ``config.start_cleanup`` is False
    """
    return MemoryCacheStore(config=config, clock=clock, publisher=publisher)
