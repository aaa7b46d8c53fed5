"""Cache TTL invalid exception."""

from typing import Any, Dict, Optional

from .base import AgriCacheError


class CacheTTLInvalid(AgriCacheError, ValueError):
    """Raised when a TTL value or preset name cannot be resolved."""

    def __init__(
        self,
        value: Any,
        reason: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid cache TTL {value!r}: {reason}",
            error_code=error_code or "CACHE_TTL_INVALID",
            details={"value": repr(value), **(details or {})},
        )

    @classmethod
    def not_positive(cls, value: Any) -> "CacheTTLInvalid":
        """Create exception for zero or negative durations."""
        return cls(value, "TTL must be a positive number of milliseconds", "CACHE_TTL_NOT_POSITIVE")

    @classmethod
    def not_finite(cls, value: Any) -> "CacheTTLInvalid":
        """Create exception for NaN or infinite durations."""
        return cls(value, "TTL must be a finite number of milliseconds", "CACHE_TTL_NOT_FINITE")

    @classmethod
    def unknown_preset(cls, value: Any, known: list) -> "CacheTTLInvalid":
        """Create exception for an unrecognised preset name."""
        return cls(
            value,
            f"Unknown TTL preset, expected one of {', '.join(known)}",
            "CACHE_TTL_UNKNOWN_PRESET",
            details={"known_presets": list(known)},
        )
