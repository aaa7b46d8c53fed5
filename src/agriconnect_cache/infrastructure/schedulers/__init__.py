"""Background schedulers."""

from .cleanup_scheduler import CleanupScheduler

__all__ = ["CleanupScheduler"]
