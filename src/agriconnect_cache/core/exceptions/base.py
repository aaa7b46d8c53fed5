"""Base exceptions for agriconnect-cache.

All exceptions inherit from AgriCacheError and carry an error code and
structured details so API layers can render them consistently.
"""

from typing import Any, Dict, Optional


class AgriCacheError(Exception):
    """Base exception for all agriconnect-cache errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class CacheConfigError(AgriCacheError):
    """Raised when cache configuration values are invalid."""
    pass
