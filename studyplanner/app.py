"""Main application window for StudyPlanner."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QStatusBar, QMessageBox,
)

from .errors import InvalidConfiguration, InvalidTransition, PersistenceError
from .service import StudyTimer
from .storage.port import PersistencePort
from .timer.clock import TimerClock
from .timer.state import Phase, TimerSnapshot
from .ui.timer_widget import TimerWidget, format_remaining

logger = logging.getLogger("studyplanner.app")


class StudyPlannerApp(QMainWindow):
    """Main application window."""

    def __init__(self, port: PersistencePort) -> None:
        super().__init__()
        self.setWindowTitle("StudyPlanner")
        self.setMinimumSize(380, 420)

        # ── timer ─────────────────────────────────────────────────────
        self._timer = StudyTimer(port)
        self._timer.restore_state()
        self._clock = TimerClock(self._timer.engine, self)

        # ── layout ────────────────────────────────────────────────────
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        self._timer_widget = TimerWidget(self._timer, central)
        layout.addWidget(self._timer_widget)
        self.setCentralWidget(central)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        self._build_menu_bar()

        # ── wiring ────────────────────────────────────────────────────
        engine = self._timer.engine
        engine.state_changed.connect(self._on_state_changed)
        engine.phase_completed.connect(self._on_phase_completed)
        self._timer_widget.error_raised.connect(self._show_error)

        self._on_state_changed(self._timer.snapshot())

    @property
    def timer(self) -> StudyTimer:
        return self._timer

    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu = self.menuBar().addMenu("&Timer")

        settings_action = QAction("Settings…", self)
        settings_action.setShortcut(QKeySequence("Ctrl+,"))
        settings_action.triggered.connect(self._open_settings)
        menu.addAction(settings_action)

        stop_action = QAction("Stop", self)
        stop_action.triggered.connect(self._timer.stop)
        menu.addAction(stop_action)

    # ══════════════════════════════════════════════════════════════════
    #  TIMER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, snapshot: TimerSnapshot) -> None:
        if snapshot.is_running:
            verb = "Studying" if snapshot.phase is Phase.STUDY else "On a break"
            message = f"{verb}… {format_remaining(snapshot.remaining_seconds)} left"
        elif snapshot.phase is Phase.BREAK:
            message = "Break ready. Press Start when you are."
        else:
            message = "Ready when you are!"
        self._status_bar.showMessage(message)

    def _on_phase_completed(self, snapshot: TimerSnapshot) -> None:
        if snapshot.phase is Phase.STUDY:
            logger.info(
                "Study session %s finished", snapshot.completed_study_sessions + 1
            )
        self._persist_state()

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _open_settings(self) -> None:
        """Open the settings dialog and apply any changes."""
        from .ui.settings_dialog import SettingsDialog

        dlg = SettingsDialog(self._timer.settings, parent=self)
        if not dlg.exec():
            return
        self.apply_settings(dlg.result_settings())

    def apply_settings(self, raw: dict) -> None:
        """Push new settings into the timer, reporting failures."""
        try:
            self._timer.update_settings(raw)
        except InvalidConfiguration as exc:
            self._show_error(f"Settings not applied: {exc}")
        except PersistenceError as exc:
            # already in effect, just not saved
            self._show_error(f"Settings applied but not saved: {exc}")

    def _show_error(self, text: str) -> None:
        logger.warning("%s", text)
        QMessageBox.warning(self, "StudyPlanner", text)

    def _persist_state(self) -> None:
        try:
            self._timer.save_state()
        except PersistenceError as exc:
            logger.warning("%s", exc)

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD / WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the timer."""
        if self._timer.engine.is_running:
            self._timer.pause()
            return
        try:
            self._timer.start()
        except InvalidTransition as exc:
            self._show_error(str(exc))

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and Escape (stop) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._timer.stop()
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer.pause()
        self._persist_state()
        event.accept()
