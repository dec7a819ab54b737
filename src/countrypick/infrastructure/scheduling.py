"""Scheduler adapters for the selector's search debounce."""

import asyncio
import time
from collections.abc import Callable


class ScheduledCall:
    """Handle returned by ClockScheduler.call_later."""

    def __init__(self, deadline: float, callback: Callable[[], None]) -> None:
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ClockScheduler:
    """Runs delayed callbacks from run_pending(), checked against clock().

    Nothing runs in the background: the owner calls run_pending() before
    handling each input event, so a buffer clear that came due is applied
    before the next keystroke is read.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._pending: list[ScheduledCall] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self._clock() + delay, callback)
        self._pending.append(call)
        return call

    def run_pending(self) -> None:
        now = self._clock()
        due = [c for c in self._pending if not c.cancelled and c.deadline <= now]
        self._pending = [
            c for c in self._pending if not c.cancelled and c.deadline > now
        ]
        for call in sorted(due, key=lambda c: c.deadline):
            call.callback()


class AsyncioScheduler:
    """call_later on an asyncio event loop. run_pending is a no-op: the loop fires callbacks."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)

    def run_pending(self) -> None:
        return None
