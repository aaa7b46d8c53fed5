"""Cache value objects."""

from .cache_key import CacheKey, generate_key, render_value, validate_key
from .cache_keys import CacheKeys
from .cache_metrics import CacheMetrics, CacheStats
from .cache_ttl import CacheTTL, TTLLike, TTLPreset
from .invalidation_selector import InvalidationSelector

__all__ = [
    "CacheKey",
    "CacheKeys",
    "CacheMetrics",
    "CacheStats",
    "CacheTTL",
    "InvalidationSelector",
    "TTLLike",
    "TTLPreset",
    "generate_key",
    "render_value",
    "validate_key",
]
