"""Main timer display widget.

Layout (top → bottom):
    - Phase label (STUDY / SHORT BREAK / LONG BREAK)
    - Remaining time, MM:SS
    - Progress bar through the current phase
    - Session / cycle counters
    - Stop + Start/Pause buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QProgressBar, QFrame,
)

from ..errors import InvalidTransition
from ..service import StudyTimer
from ..timer.state import Phase, TimerSnapshot


def phase_label(snapshot: TimerSnapshot) -> str:
    if snapshot.phase is Phase.STUDY:
        return "STUDY"
    return "LONG BREAK" if snapshot.is_long_break else "SHORT BREAK"


def format_remaining(seconds: int) -> str:
    minutes, seconds = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


class TimerWidget(QWidget):
    """The timer card: renders snapshots, forwards button clicks."""

    error_raised = pyqtSignal(str)

    def __init__(self, timer: StudyTimer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._timer = timer
        self._build_ui()
        self._connect_signals()
        self.show_snapshot(timer.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._phase_label = QLabel(card)
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._phase_label.setStyleSheet("font-size: 15px; font-weight: 700;")
        layout.addWidget(self._phase_label)

        self._time_label = QLabel(card)
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_label.setStyleSheet("font-size: 56px; font-weight: 600;")
        layout.addWidget(self._time_label)

        self._progress = QProgressBar(card)
        self._progress.setRange(0, 100)
        self._progress.setTextVisible(False)
        layout.addWidget(self._progress)

        self._counts_label = QLabel(card)
        self._counts_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._counts_label)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._stop_btn = QPushButton("Stop", card)
        self._stop_btn.setObjectName("dangerButton")

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._stop_btn)
        btn_row.addWidget(self._start_pause_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._on_start_pause)
        self._stop_btn.clicked.connect(self._timer.stop)
        self._timer.engine.state_changed.connect(self.show_snapshot)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        if self._timer.engine.is_running:
            self._timer.pause()
            return
        try:
            self._timer.start()
        except InvalidTransition as exc:
            self.error_raised.emit(str(exc))

    def show_snapshot(self, snapshot: TimerSnapshot) -> None:
        self._phase_label.setText(phase_label(snapshot))
        self._time_label.setText(format_remaining(snapshot.remaining_seconds))
        self._progress.setValue(int(snapshot.progress_percent))
        self._counts_label.setText(
            f"Sessions {snapshot.completed_study_sessions} · "
            f"Cycles {snapshot.current_session_index}"
        )
        self._start_pause_btn.setText("Pause" if snapshot.is_running else "Start")
        self._stop_btn.setEnabled(
            snapshot.is_running
            or snapshot.remaining_seconds != snapshot.total_seconds
            or snapshot.phase is not Phase.STUDY
            or snapshot.completed_study_sessions > 0
        )

    # ── test / UI accessors ──────────────────────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def phase_text(self) -> str:
        return self._phase_label.text()

    @property
    def counts_text(self) -> str:
        return self._counts_label.text()

    @property
    def start_pause_button(self) -> QPushButton:
        return self._start_pause_btn

    @property
    def stop_button(self) -> QPushButton:
        return self._stop_btn

    @property
    def progress_value(self) -> int:
        return self._progress.value()
