"""Cleanup scheduler.

ONLY periodic execution - runs the store's expired-entry sweep on a fixed
interval from a background thread until stopped.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class CleanupScheduler:
    """Recurring background task with an explicit stop.

    The task runs every ``interval_seconds`` on a daemon thread. A failing
    run is logged and the loop carries on with the next tick.
    """

    def __init__(
        self,
        task: Callable[[], int],
        interval_seconds: float,
        name: str = "agriconnect-cache-cleanup",
        join_timeout_seconds: float = 5.0,
    ):
        """Initialize scheduler.

        Args:
            task: Callable returning the number of entries removed
            interval_seconds: Delay between runs
            name: Thread name, shown in thread dumps
            join_timeout_seconds: How long stop() waits for the thread
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self._task = task
        self._interval = interval_seconds
        self._name = name
        self._join_timeout = join_timeout_seconds
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self.runs = 0
        self.failures = 0

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background thread; no-op when already running.

        A thread that was told to stop but has not exited yet still counts
        as running, so a late start() never leaves two sweepers behind.
        """
        with self._lock:
            if self.is_running:
                if self._stop_event.is_set():
                    logger.warning("Cleanup thread %s is still stopping, not restarting", self._name)
                return
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._loop,
                args=(self._stop_event,),
                name=self._name,
                daemon=True,
            )
            self._thread.start()
            logger.debug("Cleanup scheduler started (interval=%ss)", self._interval)

    def stop(self) -> None:
        """Signal the thread to exit and wait for it."""
        with self._lock:
            thread = self._thread
            self._stop_event.set()

        if thread is None:
            return
        if thread is not threading.current_thread():
            thread.join(self._join_timeout)
            if thread.is_alive():
                logger.warning("Cleanup thread %s did not stop within %ss", self._name, self._join_timeout)
                return

        with self._lock:
            if self._thread is thread:
                self._thread = None
        logger.debug("Cleanup scheduler stopped")

    def run_once(self) -> int:
        """Run the task inline, with the same error handling as the loop."""
        self.runs += 1
        try:
            removed = self._task()
        except Exception:
            self.failures += 1
            logger.exception("Cache cleanup run failed")
            return 0

        if removed:
            logger.info("Cache cleanup removed %d expired entries", removed)
        return removed

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            self.run_once()
