"""Cache infrastructure - store, configuration and background sweep."""

from .configuration import CacheConfig, ConfigSource, create_cache_config
from .repositories import CacheStore, MemoryCacheStore, create_cache_store
from .schedulers import CleanupScheduler

__all__ = [
    "CacheConfig",
    "CacheStore",
    "CleanupScheduler",
    "ConfigSource",
    "MemoryCacheStore",
    "create_cache_config",
    "create_cache_store",
]
