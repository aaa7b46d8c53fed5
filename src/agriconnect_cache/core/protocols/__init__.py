"""Cache protocols - contracts between the store and its collaborators."""

from typing import Any, Awaitable, Callable, Protocol, runtime_checkable

from ..events.cache_event import CacheEvent


@runtime_checkable
class CacheEventListener(Protocol):
    """Callable notified synchronously of every cache event."""

    def __call__(self, event: CacheEvent) -> None:
        ...


@runtime_checkable
class Clock(Protocol):
    """Millisecond clock used for entry timestamps and expiry checks."""

    def __call__(self) -> float:
        ...


Fetcher = Callable[[], Awaitable[Any]]

__all__ = ["CacheEventListener", "Clock", "Fetcher"]
