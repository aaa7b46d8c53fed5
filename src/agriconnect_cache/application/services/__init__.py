"""Cache application services."""

from .cache_manager import CacheManager, create_cache_manager
from .entity_cache import EntityCache, PlotsCache, create_plots_cache
from .event_publisher import CacheEventPublisher, EventMetrics, create_cache_event_publisher

__all__ = [
    "CacheEventPublisher",
    "CacheManager",
    "EntityCache",
    "EventMetrics",
    "PlotsCache",
    "create_cache_event_publisher",
    "create_cache_manager",
    "create_plots_cache",
]
