"""AgriConnect cache - client-side response cache for field-data services.

Process-local key/value store with per-entry TTL, deterministic key
generation, substring and tag invalidation, a background expiry sweep
and cache activity events.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .core import (
    AgriCacheError,
    CacheConfigError,
    CacheEntry,
    CacheEvent,
    CacheEventListener,
    CacheEventType,
    CacheKey,
    CacheKeyInvalid,
    CacheKeys,
    CacheMetrics,
    CacheStats,
    CacheTTL,
    CacheTTLInvalid,
    Clock,
    InvalidSelectorError,
    InvalidationSelector,
    TTLPreset,
    generate_key,
)

from .infrastructure import (
    CacheConfig,
    CacheStore,
    CleanupScheduler,
    MemoryCacheStore,
    create_cache_config,
    create_cache_store,
)

from .application import (
    CacheEventPublisher,
    CacheManager,
    EntityCache,
    PlotsCache,
    create_cache_manager,
    create_plots_cache,
)

__all__ = [
    "__version__",
    # Store
    "CacheStore",
    "MemoryCacheStore",
    "create_cache_store",
    "CleanupScheduler",
    # Configuration
    "CacheConfig",
    "create_cache_config",
    "setup_logging",
    # Services
    "CacheEventPublisher",
    "CacheManager",
    "EntityCache",
    "PlotsCache",
    "create_cache_manager",
    "create_plots_cache",
    # Domain
    "CacheEntry",
    "CacheEvent",
    "CacheEventListener",
    "CacheEventType",
    "CacheKey",
    "CacheKeys",
    "CacheMetrics",
    "CacheStats",
    "CacheTTL",
    "Clock",
    "InvalidationSelector",
    "TTLPreset",
    "generate_key",
    # Exceptions
    "AgriCacheError",
    "CacheConfigError",
    "CacheKeyInvalid",
    "CacheTTLInvalid",
    "InvalidSelectorError",
]
