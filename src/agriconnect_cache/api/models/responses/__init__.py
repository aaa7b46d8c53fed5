"""Cache API response models."""

from .cache_stats_response import CacheMetricsResponse, CacheStatsResponse
from .operation_response import OperationResponse

__all__ = ["CacheMetricsResponse", "CacheStatsResponse", "OperationResponse"]
