"""Invalid selector exception.

Raised when a bulk invalidation names nothing to match on.
"""

from .base import AgriCacheError


class InvalidSelectorError(AgriCacheError, ValueError):
    """Invalidation selector has no pattern, tags or key predicate."""

    def __init__(self, reason: str = "Invalidation requires a non-empty pattern or at least one tag"):
        self.reason = reason
        super().__init__(reason, error_code="CACHE_SELECTOR_EMPTY")
