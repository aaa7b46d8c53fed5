"""Cache service dependencies.

ONLY cache service dependencies - provides FastAPI dependency injection
for the application's cache store.
"""

from fastapi import Depends, FastAPI, HTTPException, Request, status

from ...application.services.cache_manager import CacheManager
from ...infrastructure.repositories.memory_cache_store import MemoryCacheStore


def install_cache_store(app: FastAPI, store: MemoryCacheStore) -> MemoryCacheStore:
    """Attach the store to the application.

    The caller owns the store lifecycle and stops its sweep from the
    application lifespan with store.shutdown().

    Usage at bootstrap:

    ```python
    app = FastAPI()
    store = install_cache_store(app, create_cache_store(create_cache_config()))
    app.include_router(cache_router)
    ```
    """
    app.state.cache_store = store
    return store


def get_cache_store(request: Request) -> MemoryCacheStore:
    """Get the store installed on the application."""
    store = getattr(request.app.state, "cache_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Cache store is not configured",
        )
    return store


def get_cache_manager(store: MemoryCacheStore = Depends(get_cache_store)) -> CacheManager:
    """Get cache manager dependency.

    Usage in feature endpoints:

    ```python
    @router.get("/agents/{agent_id}/plots")
    async def list_plots(agent_id: str, cache: CacheManager = Depends(get_cache_manager)):
        return await cache.get_or_fetch(
            CacheKeys.plots.agent(agent_id),
            lambda: plots_repository.for_agent(agent_id),
            ttl="medium",
        )
    ```
    """
    return CacheManager(store)
