"""
Trailing-edge debounce on the asyncio loop.

A pushed value is committed only after `delay` seconds without another
push. A newer push cancels the pending timer and starts a fresh one, so
intermediate values are never committed.
"""

import asyncio
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

# Search debounce delay in seconds
SEARCH_DEBOUNCE_DELAY = 0.3


class Debouncer(Generic[T]):
    """Single-timer debouncer holding the pending value alongside its timer handle."""

    def __init__(self, on_commit: Callable[[T], None], delay: float = SEARCH_DEBOUNCE_DELAY):
        self.delay = delay
        self._on_commit = on_commit
        self._timer: Optional[asyncio.TimerHandle] = None
        self._pending: Optional[T] = None

    @property
    def is_pending(self) -> bool:
        return self._timer is not None

    @property
    def pending_value(self) -> Optional[T]:
        return self._pending

    def push(self, value: T) -> None:
        """Replace the pending value and restart the quiet period. Needs a running loop."""
        # Atomic swap: drop the old timer before arming the new one
        old_timer = self._timer
        self._timer = None
        if old_timer is not None:
            old_timer.cancel()
        self._pending = value
        self._timer = asyncio.get_running_loop().call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Discard the pending value without committing it."""
        timer = self._timer
        self._timer = None
        if timer is not None:
            timer.cancel()
        self._pending = None

    def flush(self) -> None:
        """Commit the pending value now, if any."""
        if self._timer is not None:
            self._timer.cancel()
            self._fire()

    def _fire(self) -> None:
        self._timer = None
        value = self._pending
        self._pending = None
        self._on_commit(value)
