"""QTimer-backed countdown scheduler."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer

from starmatch.core.scheduler import TickCallback


class QtTickScheduler:
    """Drives session ticks from the Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setSingleShot(False)
        self._callback: Optional[TickCallback] = None
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self, interval_ms: int, callback: TickCallback) -> None:
        self._timer.stop()
        self._callback = callback
        self._timer.start(interval_ms)

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
