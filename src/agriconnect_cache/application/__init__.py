"""Cache application layer - orchestration on top of the store."""

from .services import (
    CacheEventPublisher,
    CacheManager,
    EntityCache,
    PlotsCache,
    create_cache_event_publisher,
    create_cache_manager,
    create_plots_cache,
)

__all__ = [
    "CacheEventPublisher",
    "CacheManager",
    "EntityCache",
    "PlotsCache",
    "create_cache_event_publisher",
    "create_cache_manager",
    "create_plots_cache",
]
