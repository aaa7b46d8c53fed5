"""Cache API request models."""

from .invalidate_request import InvalidateRequest

__all__ = ["InvalidateRequest"]
