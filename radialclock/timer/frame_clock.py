"""Per-frame driver for the clock engine.

A ``QTimer`` fires at roughly display rate; each firing measures the
real time since the previous one and emits it.  The interval is only a
target: the engine is fed the measured delta, never the nominal one.
"""

from __future__ import annotations

import time

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


FRAME_INTERVAL_MS = 16  # ~60 fps


class FrameClock(QObject):
    """Emits ``frame(delta_seconds)`` once per timer firing."""

    frame = pyqtSignal(float)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = FRAME_INTERVAL_MS,
        clock=time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._clock = clock
        self._last: float | None = None

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def start(self) -> None:
        self._last = self._clock()
        self._qt_timer.start()

    def stop(self) -> None:
        self._qt_timer.stop()
        self._last = None

    def _on_timeout(self) -> None:
        now = self._clock()
        delta = 0.0 if self._last is None else max(0.0, now - self._last)
        self._last = now
        self.frame.emit(delta)
