"""Cache domain entities."""

from .cache_entry import CacheEntry, estimate_size

__all__ = ["CacheEntry", "estimate_size"]
