"""Application ports (interfaces). Implemented by infrastructure adapters or the host UI."""

from collections.abc import Callable
from typing import Any, Protocol


class Cancellable(Protocol):
    """A pending delayed call."""

    def cancel(self) -> None:
        """Prevent the call from running. Safe to call more than once."""
        ...


class Scheduler(Protocol):
    """Schedules delayed callbacks for the search debounce."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        """Run callback after delay seconds unless cancelled."""
        ...

    def run_pending(self) -> None:
        """Run callbacks that are due. No-op for schedulers driven by an event loop."""
        ...


class ScrollIntoView(Protocol):
    """Host primitive that brings target into view inside container."""

    def __call__(self, container: Any, target: Any) -> None: ...
