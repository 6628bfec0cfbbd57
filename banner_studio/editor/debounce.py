"""
Capture Debouncer
=================

Coalesces bursts of edits into a single history capture.

Each trigger() cancels the pending timer and schedules a new one on the
running asyncio loop. Outside an event loop the capture stays pending
until flush() is called.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.5


class CaptureDebouncer:
    """Cancellable delayed callback."""

    def __init__(self, callback: Callable[[], None], delay: float = DEFAULT_DELAY_SECONDS):
        self.callback = callback
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending = False

    @property
    def pending(self) -> bool:
        """True while a capture is scheduled but has not fired."""
        return self._pending

    def trigger(self) -> None:
        """Start or restart the quiet period."""
        self._cancel_timer()
        self._pending = True

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return

        self._handle = loop.call_later(self.delay, self._fire)

    def flush(self) -> bool:
        """Fire a pending capture immediately. Returns True if one fired."""
        if not self._pending:
            return False
        self._cancel_timer()
        self._fire()
        return True

    def cancel(self) -> None:
        """Drop any pending capture without firing it."""
        self._cancel_timer()
        self._pending = False

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._pending = False
        logger.debug("[DEBOUNCE] Quiet period elapsed, capturing")
        self.callback()
