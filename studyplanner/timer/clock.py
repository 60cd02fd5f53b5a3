"""1 Hz host clock that drives :meth:`TimerEngine.tick`.

The ``QTimer`` only runs while the engine reports ``is_running``, so a
paused or freshly transitioned timer costs nothing.  Missed ticks are
not caught up.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer

from .engine import TimerEngine
from .state import TimerSnapshot

TICK_INTERVAL_MS = 1000


class TimerClock(QObject):
    def __init__(
        self,
        engine: TimerEngine,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

        engine.state_changed.connect(self._on_state_changed)
        self._sync(engine.is_running)

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def _on_timeout(self) -> None:
        self._engine.tick()

    def _on_state_changed(self, snapshot: TimerSnapshot) -> None:
        self._sync(snapshot.is_running)

    def _sync(self, running: bool) -> None:
        if running and not self._qt_timer.isActive():
            self._qt_timer.start()
        elif not running and self._qt_timer.isActive():
            self._qt_timer.stop()
