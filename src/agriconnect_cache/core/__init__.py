"""Cache core - entities, value objects, events, exceptions and protocols."""

from .entities import CacheEntry
from .events import CacheEvent, CacheEventType
from .exceptions import (
    AgriCacheError,
    CacheConfigError,
    CacheKeyInvalid,
    CacheTTLInvalid,
    InvalidSelectorError,
)
from .protocols import CacheEventListener, Clock, Fetcher
from .value_objects import (
    CacheKey,
    CacheKeys,
    CacheMetrics,
    CacheStats,
    CacheTTL,
    InvalidationSelector,
    TTLPreset,
    generate_key,
)

__all__ = [
    "AgriCacheError",
    "CacheConfigError",
    "CacheEntry",
    "CacheEvent",
    "CacheEventListener",
    "CacheEventType",
    "CacheKey",
    "CacheKeyInvalid",
    "CacheKeys",
    "CacheMetrics",
    "CacheStats",
    "CacheTTL",
    "CacheTTLInvalid",
    "Clock",
    "Fetcher",
    "InvalidSelectorError",
    "InvalidationSelector",
    "TTLPreset",
    "generate_key",
]
