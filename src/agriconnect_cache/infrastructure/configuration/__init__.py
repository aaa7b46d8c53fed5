"""Cache configuration."""

from .cache_config import CacheConfig, ConfigSource, create_cache_config

__all__ = ["CacheConfig", "ConfigSource", "create_cache_config"]
