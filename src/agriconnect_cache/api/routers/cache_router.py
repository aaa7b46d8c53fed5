"""Cache admin router.

ONLY cache administration - inspection, invalidation and cleanup endpoints
for the process cache store.
"""

import time

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies.cache_dependencies import get_cache_store
from ..models.requests.invalidate_request import InvalidateRequest
from ..models.responses.cache_stats_response import CacheMetricsResponse, CacheStatsResponse
from ..models.responses.operation_response import OperationResponse
from ...core.exceptions import AgriCacheError, InvalidSelectorError
from ...infrastructure.repositories.memory_cache_store import MemoryCacheStore


cache_router = APIRouter(
    prefix="/cache",
    tags=["Cache"],
)


def _to_http_error(error: AgriCacheError) -> HTTPException:
    """Map cache errors to client errors."""
    code = 422 if isinstance(error, InvalidSelectorError) else status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=error.to_dict())


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


@cache_router.get(
    "/stats",
    response_model=CacheStatsResponse,
    summary="Get cache statistics",
    description="Number of entries held, their keys and the expired backlog",
)
async def get_cache_stats(
    store: MemoryCacheStore = Depends(get_cache_store),
) -> CacheStatsResponse:
    return CacheStatsResponse.from_stats(store.get_stats())


@cache_router.get(
    "/metrics",
    response_model=CacheMetricsResponse,
    summary="Get cache metrics",
    description="Hit, miss, write and removal counters",
)
async def get_cache_metrics(
    store: MemoryCacheStore = Depends(get_cache_store),
) -> CacheMetricsResponse:
    return CacheMetricsResponse.from_metrics(store.get_metrics())


@cache_router.post(
    "/invalidate",
    response_model=OperationResponse,
    summary="Invalidate cache entries",
    description="Remove every entry whose key contains the pattern or that carries one of the tags",
)
async def invalidate_cache(
    request: InvalidateRequest,
    store: MemoryCacheStore = Depends(get_cache_store),
) -> OperationResponse:
    """Invalidate cache entries by pattern or tags."""
    started = time.perf_counter()
    try:
        removed = store.invalidate(pattern=request.pattern, tags=request.tags)
    except AgriCacheError as e:
        raise _to_http_error(e)

    return OperationResponse(
        success=True,
        message=f"Invalidated {removed} cache entries",
        data={"removed": removed},
        operation_time_ms=_elapsed_ms(started),
    )


@cache_router.post(
    "/cleanup",
    response_model=OperationResponse,
    summary="Remove expired entries",
    description="Run the expired-entry sweep immediately",
)
async def cleanup_cache(
    store: MemoryCacheStore = Depends(get_cache_store),
) -> OperationResponse:
    started = time.perf_counter()
    removed = store.cleanup()
    return OperationResponse(
        success=True,
        message=f"Removed {removed} expired cache entries",
        data={"removed": removed},
        operation_time_ms=_elapsed_ms(started),
    )


@cache_router.delete(
    "/entries/{key:path}",
    response_model=OperationResponse,
    summary="Delete cache entry",
)
async def delete_cache_entry(
    key: str,
    store: MemoryCacheStore = Depends(get_cache_store),
) -> OperationResponse:
    """Delete one entry; deleting a missing key still succeeds."""
    started = time.perf_counter()
    try:
        existed = store.delete(key)
    except AgriCacheError as e:
        raise _to_http_error(e)

    return OperationResponse(
        success=True,
        message="Cache entry deleted" if existed else "Cache entry not found",
        data={"key": key, "existed": existed},
        operation_time_ms=_elapsed_ms(started),
    )


@cache_router.delete(
    "",
    response_model=OperationResponse,
    summary="Clear cache",
    description="Remove every entry and reset the metrics",
)
async def clear_cache(
    store: MemoryCacheStore = Depends(get_cache_store),
) -> OperationResponse:
    started = time.perf_counter()
    removed = len(store)
    store.clear()
    return OperationResponse(
        success=True,
        message="Cache cleared",
        data={"removed": removed},
        operation_time_ms=_elapsed_ms(started),
    )
