"""
Noteboard Canvas: Trailing Debounce
===================================

What:  Keyed trailing debounce on the running asyncio loop.
How:   schedule(key, fn, delay) cancels the pending timer for `key` and
       starts a new one; when a timer survives its quiet period, `fn()` is
       awaited in a task. Bursts of calls collapse into one run of the most
       recently scheduled `fn`.

Keys in use:
    "board-view"            camera saves (CameraController)
    "card:<id>:edit"        text/importance edits of one card (CardStore)

Failures of a scheduled call are logged and dropped: the client does not
retry, and local state stays as the user left it.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional, Set

logger = logging.getLogger(__name__)

AsyncCallback = Callable[[], Awaitable[None]]


class Debouncer:
    """One pending timer per key; timers are restarted, never queued."""

    def __init__(self) -> None:
        self._timers: Dict[str, asyncio.TimerHandle] = {}
        self._callbacks: Dict[str, AsyncCallback] = {}
        self._running: Set[asyncio.Task] = set()

    def schedule(self, key: str, fn: AsyncCallback, delay: float) -> None:
        """(Re)start the quiet period for `key`; `fn` replaces any pending call."""
        self.cancel(key)
        loop = asyncio.get_running_loop()
        self._callbacks[key] = fn
        self._timers[key] = loop.call_later(delay, self._fire, key)

    def cancel(self, key: str) -> bool:
        """Drop the pending call for `key`. Returns True if one was pending."""
        self._callbacks.pop(key, None)
        timer = self._timers.pop(key, None)
        if timer is None:
            return False
        timer.cancel()
        return True

    def is_pending(self, key: str) -> bool:
        return key in self._timers

    @property
    def pending_keys(self) -> Set[str]:
        return set(self._timers)

    async def flush(self, key: Optional[str] = None) -> None:
        """
        Run pending calls now instead of waiting out their quiet period,
        then wait for every call already in flight.
        """
        keys = [key] if key is not None else list(self._timers)
        for pending in keys:
            if pending in self._timers:
                self._fire(pending)
        if self._running:
            await asyncio.gather(*list(self._running), return_exceptions=True)

    async def aclose(self) -> None:
        await self.flush()

    # ── Internals ─────────────────────────────────────────────────────────

    def _fire(self, key: str) -> None:
        timer = self._timers.pop(key, None)
        if timer is not None:
            timer.cancel()
        fn = self._callbacks.pop(key, None)
        if fn is None:
            return
        task = asyncio.get_running_loop().create_task(self._run(key, fn))
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    async def _run(self, key: str, fn: AsyncCallback) -> None:
        try:
            await fn()
        except Exception:
            logger.error("Debounced call %r failed", key, exc_info=True)
