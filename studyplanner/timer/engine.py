"""Pomodoro state machine for StudyPlanner.

Phases
------
STUDY    Study interval counting down.
BREAK    Short or long break counting down.

Each phase is either running or paused (``is_running``).

Transitions
-----------
paused  → running                      (start)
running → paused                       (pause)
running → next phase, paused           (tick reaching zero)
Any     → STUDY, full duration, paused (stop / reset / settings change)

Design choices
--------------
- A finished phase never chains into the next one: every transition
  halts, and the next phase needs an explicit ``start()``.
- Settings are never applied to an in-flight countdown; changing them
  resets the engine.
- The engine owns no clock.  A host clock calls ``tick()`` once a
  second (see :mod:`studyplanner.timer.clock`).
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, Mapping, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..errors import InvalidTransition
from ..settings import DEFAULT_SETTINGS, TimerSettings
from .policy import is_long_break_due, next_duration
from .state import Phase, TimerSnapshot, TimerState


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based Pomodoro countdown with study/break phases and counters.

    All public operations are serialized on an internal lock, so a host
    may drive ``tick()`` from a different thread than the controls.

    Signals
    -------
    state_changed(snapshot: TimerSnapshot)
        Emitted after every operation that changed the state.
    phase_completed(snapshot: TimerSnapshot)
        Emitted once per finished phase, before ``state_changed``.  The
        snapshot is the finished phase at zero remaining (100 %).
    """

    state_changed = pyqtSignal(object)
    phase_completed = pyqtSignal(object)

    def __init__(
        self,
        settings: TimerSettings | None = None,
        parent: QObject | None = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(parent)
        self._settings: TimerSettings = settings or DEFAULT_SETTINGS
        self._logger = logger or logging.getLogger("studyplanner.timer")
        self._lock = threading.RLock()
        self._state = TimerState.initial(self._settings.study_seconds)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def settings(self) -> TimerSettings:
        with self._lock:
            return self._settings

    @property
    def phase(self) -> Phase:
        with self._lock:
            return self._state.phase

    @property
    def remaining_seconds(self) -> int:
        with self._lock:
            return self._state.remaining_seconds

    @property
    def total_seconds(self) -> int:
        with self._lock:
            return self._state.total_seconds

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._state.is_running

    @property
    def completed_study_sessions(self) -> int:
        with self._lock:
            return self._state.completed_study_sessions

    @property
    def current_session_index(self) -> int:
        with self._lock:
            return self._state.current_session_index

    def snapshot(self) -> TimerSnapshot:
        with self._lock:
            return self._state.snapshot()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start or resume the countdown.  No-op when already running.

        Raises :class:`InvalidTransition` when the countdown is depleted;
        call ``stop()`` first.
        """
        with self._lock:
            if self._state.remaining_seconds <= 0:
                raise InvalidTransition(
                    "cannot start a depleted timer; stop or reset it first"
                )
            if self._state.is_running:
                return
            self._state.is_running = True
            snap = self._state.snapshot()

        self._logger.info(
            "Timer started: phase=%s remaining=%ss",
            snap.phase.value,
            snap.remaining_seconds,
        )
        self.state_changed.emit(snap)

    def pause(self) -> None:
        """Freeze the countdown.  Counters and remaining time are kept."""
        with self._lock:
            if not self._state.is_running:
                return
            self._state.is_running = False
            snap = self._state.snapshot()

        self._logger.info(
            "Timer paused: phase=%s remaining=%ss",
            snap.phase.value,
            snap.remaining_seconds,
        )
        self.state_changed.emit(snap)

    def stop(self) -> None:
        """Discard all progress and return to a fresh study phase."""
        with self._lock:
            self._state = TimerState.initial(self._settings.study_seconds)
            snap = self._state.snapshot()

        self._logger.info("Timer stopped: study=%ss", snap.total_seconds)
        self.state_changed.emit(snap)

    reset = stop

    def apply_settings(self, settings: TimerSettings) -> None:
        """Replace the settings and reset; never touches a live countdown."""
        with self._lock:
            self._settings = settings
            self._state = TimerState.initial(settings.study_seconds)
            snap = self._state.snapshot()

        self._logger.info(
            "Timer settings changed: study=%s break=%s long_break=%s every=%s",
            settings.study_minutes,
            settings.break_minutes,
            settings.long_break_minutes,
            settings.sessions_before_long_break,
        )
        self.state_changed.emit(snap)

    def tick(self) -> TimerSnapshot | None:
        """Advance the countdown by one second.

        Returns the resulting snapshot, or ``None`` when paused.
        """
        completed: TimerSnapshot | None = None
        with self._lock:
            state = self._state
            if not state.is_running:
                return None

            if state.remaining_seconds > 1:
                state.remaining_seconds -= 1
            else:
                completed = replace(
                    state.snapshot(), remaining_seconds=0, is_running=False
                )
                self._advance()
            snap = state.snapshot()

        if completed is not None:
            self._logger.info(
                "Phase completed: %s → %s (%ss%s) sessions=%s cycles=%s",
                completed.phase.value,
                snap.phase.value,
                snap.total_seconds,
                ", long" if snap.is_long_break else "",
                snap.completed_study_sessions,
                snap.current_session_index,
            )
            self.phase_completed.emit(completed)
        self.state_changed.emit(snap)
        return snap

    def restore(self, payload: Mapping[str, Any]) -> None:
        """Load a saved snapshot payload (``TimerSnapshot.to_dict()``).

        The restored timer is always paused.  Raises
        :class:`InvalidTransition` when the payload does not describe a
        state reachable under the current settings.
        """
        with self._lock:
            restored = _state_from_payload(payload, self._settings)
            self._state = restored
            snap = restored.snapshot()

        self._logger.info(
            "Timer restored: phase=%s remaining=%ss",
            snap.phase.value,
            snap.remaining_seconds,
        )
        self.state_changed.emit(snap)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _advance(self) -> None:
        """Move to the next phase and bump the counters.  Lock held."""
        state = self._state
        if state.phase is Phase.STUDY:
            state.completed_study_sessions += 1
            next_phase = Phase.BREAK
        else:
            state.current_session_index += 1
            next_phase = Phase.STUDY

        duration, is_long = next_duration(
            next_phase, state.completed_study_sessions, self._settings
        )
        state.phase = next_phase
        state.total_seconds = duration
        state.remaining_seconds = duration
        state.is_long_break = is_long
        state.is_running = False


def _state_from_payload(
    payload: Mapping[str, Any], settings: TimerSettings
) -> TimerState:
    def _int(key: str) -> int:
        value = payload.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidTransition(f"{key} must be a non-negative integer")
        return value

    try:
        phase = Phase(payload.get("phase"))
    except ValueError:
        raise InvalidTransition(f"unknown phase {payload.get('phase')!r}") from None

    remaining = _int("remainingSeconds")
    total = _int("totalSeconds")
    completed = _int("completedStudySessions")
    cycles = _int("currentSessionIndex")
    is_long = payload.get("isLongBreak", False) is True

    if phase is Phase.STUDY and is_long:
        raise InvalidTransition("a study phase cannot be a long break")
    if phase is Phase.BREAK:
        expected = settings.long_break_seconds if is_long else settings.break_seconds
    else:
        expected = settings.study_seconds
    if total != expected:
        raise InvalidTransition(
            f"totalSeconds {total} does not match the {phase.value} duration {expected}"
        )
    if remaining > total:
        raise InvalidTransition("remainingSeconds exceeds totalSeconds")
    if phase is Phase.STUDY and completed != cycles:
        raise InvalidTransition(
            "a study phase needs as many finished sessions as cycles"
        )
    if phase is Phase.BREAK and (completed < 1 or completed != cycles + 1):
        raise InvalidTransition(
            "a break must follow a study session not yet closed by a cycle"
        )
    if phase is Phase.BREAK and is_long != is_long_break_due(completed, settings):
        raise InvalidTransition(
            f"long break flag does not match the cadence after {completed} sessions"
        )

    return TimerState(
        phase=phase,
        remaining_seconds=remaining,
        total_seconds=total,
        is_running=False,
        completed_study_sessions=completed,
        current_session_index=cycles,
        is_long_break=is_long,
    )
