"""Cache domain exceptions."""

from .base import AgriCacheError, CacheConfigError
from .cache_key_invalid import CacheKeyInvalid
from .cache_ttl_invalid import CacheTTLInvalid
from .invalid_selector import InvalidSelectorError

__all__ = [
    "AgriCacheError",
    "CacheConfigError",
    "CacheKeyInvalid",
    "CacheTTLInvalid",
    "InvalidSelectorError",
]
