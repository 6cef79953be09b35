# =======================================================================================
# card_access/workers/session_sweeper.py - Background Session Sweeper
# =======================================================================================
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..services.session_cache import SessionCache

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Background worker evicting expired admin sessions on a fixed interval."""

    def __init__(self, cache: SessionCache, interval: float):
        self.cache = cache
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------
    def start(self):
        """Start the sweeper in a background thread."""
        if self.running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_loop, name="session-sweeper", daemon=True
        )
        self._thread.start()
        logger.info("Session sweeper started (every %ss)", self.interval)

    def stop(self, timeout: Optional[float] = 5.0):
        """Signal the loop and wait for it to exit."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Session sweeper stopped")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def _run_loop(self):
        # wait() returns True as soon as stop is requested, ahead of the next tick
        while not self._stop_event.wait(self.interval):
            try:
                self.cache.sweep()
            except Exception:
                logger.exception("Session sweep failed; retrying next interval")
