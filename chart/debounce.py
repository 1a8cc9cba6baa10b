"""Trailing-edge debounce on the running asyncio loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

RESIZE_DEBOUNCE_SEC = 0.15
INITIAL_FIT_DELAY_SEC = 0.1


class Debouncer:
    """Run ``callback`` once, ``delay`` seconds after the last :meth:`trigger`.

    Each trigger supersedes the pending one. A generation counter is checked
    when the timer fires so a superseded or cancelled timer never runs the
    callback, even if its handle was already queued.
    """

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.delay = delay
        self.callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        generation = self._generation
        self._handle = loop.call_later(self.delay, self._fire, generation)

    def cancel(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Dropping stale debounce timer")
            return
        self._handle = None
        self.callback()
