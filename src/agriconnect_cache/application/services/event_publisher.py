"""Cache event publishing service.

ONLY event publishing - delivers cache events to in-process listeners for
metrics, debugging and cache-activity dashboards.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ...core.events.cache_event import CacheEvent
from ...core.protocols import CacheEventListener

logger = logging.getLogger(__name__)


@dataclass
class EventMetrics:
    """Event delivery metrics."""
    total_published: int = 0
    successful_deliveries: int = 0
    failed_deliveries: int = 0
    last_publish_time: Optional[datetime] = None
    last_error: Optional[str] = None

    @property
    def failure_rate(self) -> float:
        """Calculate failure rate percentage over all delivery attempts."""
        attempts = self.successful_deliveries + self.failed_deliveries
        if attempts == 0:
            return 0.0
        return (self.failed_deliveries / attempts) * 100.0


class CacheEventPublisher:
    """Synchronous, best-effort event fan-out.

    Listeners are called in subscription order on the publishing thread.
    A listener that raises is logged and skipped; the remaining listeners
    still receive the event and the exception never reaches the caller.
    """

    def __init__(self, enabled: bool = True):
        """Initialize cache event publisher.

        Args:
            enabled: When False, published events are dropped
        """
        self._enabled = enabled
        self._listeners: List[CacheEventListener] = []
        self._lock = threading.Lock()
        self._metrics = EventMetrics()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    @property
    def metrics(self) -> EventMetrics:
        return self._metrics

    def subscribe(self, listener: CacheEventListener) -> Callable[[], None]:
        """Register a listener.

        Returns:
            Callable that unsubscribes this listener
        """
        if not callable(listener):
            raise TypeError("Cache event listener must be callable")

        with self._lock:
            self._listeners.append(listener)

        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: CacheEventListener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

    def publish(self, event: CacheEvent) -> None:
        """Deliver one event to every current listener."""
        if not self._enabled:
            return

        with self._lock:
            listeners = list(self._listeners)

        self._metrics.total_published += 1
        self._metrics.last_publish_time = datetime.now(timezone.utc)

        for listener in listeners:
            try:
                listener(event)
                self._metrics.successful_deliveries += 1
            except Exception as e:
                self._metrics.failed_deliveries += 1
                self._metrics.last_error = str(e)
                logger.exception(
                    "Cache event listener %r failed on %s for key %r",
                    listener, event.get_event_type(), event.key,
                )

    def publish_all(self, events: List[CacheEvent]) -> None:
        for event in events:
            self.publish(event)


def create_cache_event_publisher(enabled: bool = True) -> CacheEventPublisher:
    """Factory function to create cache event publisher."""
    return CacheEventPublisher(enabled=enabled)
