"""Timer state and the snapshot handed to observers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Phase(Enum):
    STUDY = "study"
    BREAK = "break"


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable copy of the timer state, as shown to the UI."""

    phase: Phase
    remaining_seconds: int
    total_seconds: int
    is_running: bool
    completed_study_sessions: int
    current_session_index: int
    is_long_break: bool = False

    @property
    def progress_percent(self) -> float:
        """0 → 100 progress through the current phase."""
        if self.total_seconds <= 0:
            return 0.0
        elapsed = self.total_seconds - self.remaining_seconds
        return max(0.0, min(100.0, elapsed / self.total_seconds * 100))

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase.value,
            "remainingSeconds": self.remaining_seconds,
            "totalSeconds": self.total_seconds,
            "isRunning": self.is_running,
            "completedStudySessions": self.completed_study_sessions,
            "currentSessionIndex": self.current_session_index,
            "isLongBreak": self.is_long_break,
            "progressPercent": self.progress_percent,
        }


@dataclass
class TimerState:
    """Mutable countdown state.  Only :class:`TimerEngine` writes to it."""

    phase: Phase
    remaining_seconds: int
    total_seconds: int
    is_running: bool = False
    completed_study_sessions: int = 0
    current_session_index: int = 0
    is_long_break: bool = False

    @classmethod
    def initial(cls, study_seconds: int) -> "TimerState":
        return cls(
            phase=Phase.STUDY,
            remaining_seconds=study_seconds,
            total_seconds=study_seconds,
        )

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self.phase,
            remaining_seconds=self.remaining_seconds,
            total_seconds=self.total_seconds,
            is_running=self.is_running,
            completed_study_sessions=self.completed_study_sessions,
            current_session_index=self.current_session_index,
            is_long_break=self.is_long_break,
        )
