# Area: Round
"""
trivia_engine._round.clock — Round collection window
=====================================================

A single-shot countdown per round. When it runs out the expiry callback
is invoked exactly once on the event loop, then anything awaiting
``wait()`` is released. The callback runs synchronously with respect to
the loop, so no submission can be processed between expiry and close.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger("trivia_engine.round_clock")


class RoundClock:
    """
    Countdown for one round's collection window.

    The object returned by ``start`` is the handle: callers may wait on
    it, query the remaining time, force expiry or cancel it.
    """

    def __init__(self, round_number: Optional[int] = None) -> None:
        self.round_number = round_number
        self._timer: Optional[asyncio.TimerHandle] = None
        self._expired: Optional[asyncio.Event] = None
        self._on_expire: Optional[Callable[[], None]] = None
        self._expires_at: Optional[float] = None
        self._fired = False
        self._cancelled = False

    @property
    def started(self) -> bool:
        return self._expires_at is not None

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self, duration_seconds: float,
              on_expire: Optional[Callable[[], None]] = None) -> "RoundClock":
        """
        Arm the timer. Must be called from a running event loop.

        Raises:
            RuntimeError: If the clock was already started
        """
        if self.started:
            raise RuntimeError(f"Round clock {self.round_number} already started")

        loop = asyncio.get_running_loop()
        self._on_expire = on_expire
        self._expired = asyncio.Event()
        self._expires_at = time.monotonic() + duration_seconds
        self._timer = loop.call_later(duration_seconds, self._fire)
        logger.debug("Round %s clock started (%.2fs)", self.round_number, duration_seconds)
        return self

    def remaining(self) -> float:
        """Seconds left in the window; 0 once fired, cancelled or never started."""
        if self._expires_at is None or self._fired or self._cancelled:
            return 0.0
        return max(0.0, self._expires_at - time.monotonic())

    async def wait(self) -> None:
        """Block until the clock has fired or been cancelled; check ``fired`` to tell which."""
        if self._expired is None:
            raise RuntimeError(f"Round clock {self.round_number} not started")
        await self._expired.wait()

    def expire_now(self) -> None:
        """Fire immediately instead of waiting for the timer."""
        if self._timer is not None:
            self._timer.cancel()
        self._fire()

    def cancel(self) -> None:
        """Drop the pending timer without firing and release any waiter."""
        if self._timer is not None:
            self._timer.cancel()
        self._cancelled = True
        if self._expired is not None and not self._fired:
            self._expired.set()
        logger.debug("Round %s clock cancelled", self.round_number)

    def _fire(self) -> None:
        if self._fired or self._cancelled or self._expired is None:
            logger.debug("Round %s clock: late timer ignored", self.round_number)
            return
        self._fired = True
        logger.info("Round %s clock expired", self.round_number)
        try:
            if self._on_expire is not None:
                self._on_expire()
        finally:
            self._expired.set()
