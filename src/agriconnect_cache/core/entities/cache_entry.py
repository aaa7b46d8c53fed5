"""Cache entry domain entity.

ONLY cache entry entity - one cached payload with the bookkeeping needed to
decide whether it is still live.
"""

import json
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional

from ..value_objects.cache_ttl import CacheTTL


def estimate_size(data: Any) -> Optional[int]:
    """Approximate payload size as the length of its JSON encoding."""
    try:
        return len(json.dumps(data, default=str))
    except (TypeError, ValueError, RecursionError):
        return None


@dataclass
class CacheEntry:
    """Cache entry domain entity.

    ``data`` is owned by the entry and never inspected by the store.
    ``created_at_ms`` is read from the owning store's clock.
    """

    key: str
    data: Any
    created_at_ms: float
    ttl: CacheTTL
    tags: FrozenSet[str] = field(default_factory=frozenset)
    size_bytes: Optional[int] = None

    def is_expired(self, now_ms: float) -> bool:
        """Check if cache entry has expired based on TTL."""
        return self.ttl.is_expired(self.created_at_ms, now_ms)

    @property
    def expires_at_ms(self) -> float:
        return self.ttl.expires_at(self.created_at_ms)

    def age_ms(self, now_ms: float) -> float:
        return now_ms - self.created_at_ms

    def time_until_expiry_ms(self, now_ms: float) -> float:
        """Milliseconds left before expiry, 0 once expired."""
        return max(0.0, self.expires_at_ms - now_ms)
