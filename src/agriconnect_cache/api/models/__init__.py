"""Cache API models."""

from .requests import InvalidateRequest
from .responses import CacheMetricsResponse, CacheStatsResponse, OperationResponse

__all__ = [
    "CacheMetricsResponse",
    "CacheStatsResponse",
    "InvalidateRequest",
    "OperationResponse",
]
