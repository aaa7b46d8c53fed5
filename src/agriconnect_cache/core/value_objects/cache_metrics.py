"""Cache usage metrics and store introspection snapshots."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class CacheMetrics:
    """Counters for store activity."""

    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0
    expirations: int = 0
    invalidations: int = 0

    @property
    def total_requests(self) -> int:
        """Number of reads, hits plus misses."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate percentage."""
        if self.total_requests == 0:
            return 0.0
        return (self.hits / self.total_requests) * 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "sets": self.sets,
            "deletes": self.deletes,
            "expirations": self.expirations,
            "invalidations": self.invalidations,
            "total_requests": self.total_requests,
            "hit_rate_percent": self.hit_rate,
        }


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time view of store content."""

    size: int
    keys: List[str] = field(default_factory=list)
    expired: int = 0
    oldest_entry_ms: Optional[float] = None
    newest_entry_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "keys": list(self.keys),
            "expired": self.expired,
            "oldest_entry_ms": self.oldest_entry_ms,
            "newest_entry_ms": self.newest_entry_ms,
        }
