"""Settings dialog for StudyPlanner.

A modal dialog for the four timer settings.  It does not save anything
itself: the caller reads :meth:`SettingsDialog.result_settings` after
``exec()`` and hands it to ``StudyTimer.update_settings``, which resets
the running timer.
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QPushButton, QWidget,
)

from ..settings import TimerSettings


class SettingsDialog(QDialog):
    """Modal dialog for timer durations and long-break cadence."""

    def __init__(
        self,
        settings: TimerSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Timer Settings")
        self.setMinimumWidth(360)
        self.setModal(True)

        self._settings = settings

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        title = QLabel("Timer")
        title.setStyleSheet("font-size: 15px; font-weight: 700; margin-top: 4px;")
        root.addWidget(title)

        form = QFormLayout()
        form.setContentsMargins(0, 0, 0, 0)
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._study_spin = self._minutes_spin(1, 180)
        form.addRow("Study:", self._study_spin)

        self._break_spin = self._minutes_spin(1, 60)
        form.addRow("Short break:", self._break_spin)

        self._long_spin = self._minutes_spin(1, 120)
        form.addRow("Long break:", self._long_spin)

        self._cadence_spin = QSpinBox()
        self._cadence_spin.setRange(1, 12)
        form.addRow("Sessions before long break:", self._cadence_spin)

        root.addLayout(form)

        note = QLabel("Saving resets the current timer.")
        note.setStyleSheet("color: #7A7A9A;")
        root.addWidget(note)

        root.addStretch()
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        save_btn = QPushButton("Save")
        save_btn.setObjectName("primaryButton")
        save_btn.setDefault(True)
        save_btn.clicked.connect(self.accept)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(save_btn)
        root.addLayout(btn_row)

    @staticmethod
    def _minutes_spin(low: int, high: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(low, high)
        spin.setSuffix(" min")
        return spin

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE FROM SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _populate(self) -> None:
        s = self._settings
        self._fit(self._study_spin, s.study_minutes)
        self._fit(self._break_spin, s.break_minutes)
        self._fit(self._long_spin, s.long_break_minutes)
        self._fit(self._cadence_spin, s.sessions_before_long_break)

    @staticmethod
    def _fit(spin: QSpinBox, value: int) -> None:
        # stored values above the usual range are shown as-is, not clamped
        if value > spin.maximum():
            spin.setMaximum(value)
        spin.setValue(value)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    def result_settings(self) -> dict[str, int]:
        """Raw settings in wire form, ready for ``update_settings``."""
        return {
            "studyMinutes": self._study_spin.value(),
            "breakMinutes": self._break_spin.value(),
            "longBreakMinutes": self._long_spin.value(),
            "sessionsBeforeLongBreak": self._cadence_spin.value(),
        }

    def set_values(
        self,
        study: int,
        short_break: int,
        long_break: int,
        cadence: int,
    ) -> None:
        self._study_spin.setValue(study)
        self._break_spin.setValue(short_break)
        self._long_spin.setValue(long_break)
        self._cadence_spin.setValue(cadence)
