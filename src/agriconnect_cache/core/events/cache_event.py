"""Cache event.

ONLY cache activity events - immutable records of store activity handed
to subscribed listeners for metrics and debugging.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class CacheEventType(str, Enum):
    """What happened in the store."""

    HIT = "hit"
    MISS = "miss"
    SET = "set"
    DELETE = "delete"
    EXPIRE = "expire"            # Entry found expired, on access or during cleanup
    INVALIDATE = "invalidate"    # Bulk removal by pattern or tags


@dataclass(frozen=True)
class CacheEvent:
    """Cache activity event.

    ``key`` is the affected key, or the selector description for
    ``invalidate`` events, where ``count`` is the number of removed entries.
    """

    type: CacheEventType
    key: str
    timestamp: datetime
    duration_ms: Optional[float] = None
    count: Optional[int] = None
    size_bytes: Optional[int] = None

    @classmethod
    def create(
        cls,
        event_type: CacheEventType,
        key: str,
        duration_ms: Optional[float] = None,
        count: Optional[int] = None,
        size_bytes: Optional[int] = None,
    ) -> "CacheEvent":
        return cls(
            type=event_type,
            key=key,
            timestamp=datetime.now(timezone.utc),
            duration_ms=duration_ms,
            count=count,
            size_bytes=size_bytes,
        )

    def get_event_type(self) -> str:
        """Get event type identifier."""
        return f"cache.{self.type.value}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_type": self.get_event_type(),
            "key": self.key,
            "timestamp": self.timestamp.isoformat(),
            "duration_ms": self.duration_ms,
            "count": self.count,
            "size_bytes": self.size_bytes,
        }
