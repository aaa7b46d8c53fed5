"""Cache API dependencies."""

from .cache_dependencies import get_cache_manager, get_cache_store, install_cache_store

__all__ = ["get_cache_manager", "get_cache_store", "install_cache_store"]
