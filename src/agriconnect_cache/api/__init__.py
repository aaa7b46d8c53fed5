"""Cache HTTP API - FastAPI router, models and dependencies."""

from .dependencies import get_cache_manager, get_cache_store, install_cache_store
from .routers import cache_router

__all__ = ["cache_router", "get_cache_manager", "get_cache_store", "install_cache_store"]
