"""Cache statistics response models.

ONLY statistics responses - store content and activity counters.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ....core.value_objects.cache_metrics import CacheMetrics, CacheStats


class CacheStatsResponse(BaseModel):
    """Store size and the keys it currently holds."""

    size: int = Field(..., ge=0, description="Number of entries held, expired-but-unswept included")
    keys: List[str] = Field(default_factory=list, description="Keys currently held")
    expired: int = Field(0, ge=0, description="Entries past their TTL, waiting for the sweep")
    oldest_entry_ms: Optional[float] = Field(None, description="Creation time of the oldest entry, store clock")
    newest_entry_ms: Optional[float] = Field(None, description="Creation time of the newest entry, store clock")

    @classmethod
    def from_stats(cls, stats: CacheStats) -> "CacheStatsResponse":
        return cls(**stats.to_dict())


class CacheMetricsResponse(BaseModel):
    """Store activity counters since creation or the last reset."""

    hits: int = Field(..., ge=0)
    misses: int = Field(..., ge=0)
    sets: int = Field(..., ge=0)
    deletes: int = Field(..., ge=0)
    expirations: int = Field(..., ge=0)
    invalidations: int = Field(..., ge=0)
    total_requests: int = Field(..., ge=0, description="Hits plus misses")
    hit_rate_percent: float = Field(..., ge=0.0, le=100.0)

    @classmethod
    def from_metrics(cls, metrics: CacheMetrics) -> "CacheMetricsResponse":
        return cls(**metrics.to_dict())
