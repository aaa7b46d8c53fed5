"""Cache domain events."""

from .cache_event import CacheEvent, CacheEventType

__all__ = ["CacheEvent", "CacheEventType"]
