"""Cache key invalid exception.

ONLY key validation errors - raised when a caller hands the store a key
or key prefix it cannot accept.
"""

from typing import Any, Optional

from .base import AgriCacheError


class CacheKeyInvalid(AgriCacheError, ValueError):
    """Cache key validation error.

    Raised for:
    - Empty keys or key prefixes
    - Keys that are not strings
    """

    def __init__(
        self,
        key: Any,
        reason: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        """Initialize cache key validation error.

        Args:
            key: The invalid cache key
            reason: Human-readable reason for validation failure
            error_code: Optional machine-readable error code
            details: Optional additional error details
        """
        self.key = key
        self.reason = reason
        super().__init__(
            f"Invalid cache key {key!r}: {reason}",
            error_code=error_code or "CACHE_KEY_INVALID",
            details=details,
        )

    @classmethod
    def empty_key(cls) -> "CacheKeyInvalid":
        """Create exception for empty cache key."""
        return cls(
            key="",
            reason="Cache key cannot be empty",
            error_code="CACHE_KEY_EMPTY"
        )

    @classmethod
    def empty_prefix(cls) -> "CacheKeyInvalid":
        """Create exception for an empty key prefix."""
        return cls(
            key="",
            reason="Cache key prefix cannot be empty",
            error_code="CACHE_KEY_PREFIX_EMPTY"
        )

    @classmethod
    def not_a_string(cls, key: Any) -> "CacheKeyInvalid":
        """Create exception for a key of the wrong type."""
        return cls(
            key=key,
            reason=f"Cache key must be a string, got {type(key).__name__}",
            error_code="CACHE_KEY_NOT_STRING",
            details={"key_type": type(key).__name__}
        )
