"""Cancellable trailing-edge debounce on top of the asyncio loop timer."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

DEFAULT_DELAY_MS = 300


class PendingCall:
    """Handle for one scheduled invocation.

    ``wait()`` resolves to ``True`` once the callback ran and ``False`` if the
    call was cancelled first.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._timer: asyncio.TimerHandle | None = None
        self._outcome: asyncio.Future[bool] = loop.create_future()

    @property
    def fired(self) -> bool:
        return self._outcome.done() and self._outcome.result()

    @property
    def cancelled(self) -> bool:
        return self._outcome.done() and not self._outcome.result()

    @property
    def done(self) -> bool:
        return self._outcome.done()

    def cancel(self) -> bool:
        if self._outcome.done():
            return False
        if self._timer is not None:
            self._timer.cancel()
        self._outcome.set_result(False)
        return True

    async def wait(self) -> bool:
        return await asyncio.shield(self._outcome)

    def _arm(self, timer: asyncio.TimerHandle) -> None:
        self._timer = timer

    def _mark_fired(self) -> None:
        if not self._outcome.done():
            self._outcome.set_result(True)


class Debouncer:
    """Keep at most one timer live; every ``schedule`` restarts it."""

    def __init__(self, delay_ms: int = DEFAULT_DELAY_MS) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        self.delay_ms = delay_ms
        self._pending: PendingCall | None = None
        self._closed = False

    @property
    def pending(self) -> PendingCall | None:
        if self._pending is not None and self._pending.done:
            self._pending = None
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(
        self,
        fn: Callable[..., Any],
        *args: Any,
        delay_ms: int | None = None,
    ) -> PendingCall:
        """Run ``fn(*args)`` once no other ``schedule`` happens for the delay.

        Must be called from inside a running event loop.
        """

        if self._closed:
            raise RuntimeError("Debouncer is closed")
        loop = asyncio.get_running_loop()
        self.cancel()

        call = PendingCall(loop)
        delay = self.delay_ms if delay_ms is None else delay_ms

        def _fire() -> None:
            if self._pending is call:
                self._pending = None
            call._mark_fired()
            fn(*args)

        call._arm(loop.call_later(delay / 1000, _fire))
        self._pending = call
        return call

    def cancel(self) -> bool:
        call, self._pending = self._pending, None
        if call is None:
            return False
        return call.cancel()

    def close(self) -> None:
        self.cancel()
        self._closed = True


__all__ = ["DEFAULT_DELAY_MS", "Debouncer", "PendingCall"]
