from __future__ import annotations

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class TickScheduler(Protocol):
    """Repeating one-callback timer that drives a round's countdown."""

    @property
    def is_running(self) -> bool: ...

    def start(self, interval_ms: int, callback: TickCallback) -> None: ...

    def stop(self) -> None: ...


class ManualScheduler:
    """Scheduler that only fires when told to. Used by tests and headless drivers."""

    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None
        self.interval_ms: Optional[int] = None
        self.starts = 0

    @property
    def is_running(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: TickCallback) -> None:
        self.interval_ms = interval_ms
        self._callback = callback
        self.starts += 1

    def stop(self) -> None:
        self._callback = None

    def fire(self, times: int = 1) -> int:
        """Invoke the callback up to ``times`` times; returns how many fired."""
        fired = 0
        for _ in range(times):
            if self._callback is None:
                break
            self._callback()
            fired += 1
        return fired
