"""Duration policy: how long the next phase lasts.

Consulted by the engine only at phase boundaries.
"""

from __future__ import annotations

from ..settings import TimerSettings
from .state import Phase


def is_long_break_due(completed_study_sessions: int, settings: TimerSettings) -> bool:
    """True when the break after *completed_study_sessions* is a long one."""
    return (
        completed_study_sessions > 0
        and completed_study_sessions % settings.sessions_before_long_break == 0
    )


def next_duration(
    phase: Phase,
    completed_study_sessions: int,
    settings: TimerSettings,
) -> tuple[int, bool]:
    """Return ``(duration_seconds, is_long_break)`` for the phase being entered."""
    if phase is Phase.STUDY:
        return settings.study_seconds, False

    if is_long_break_due(completed_study_sessions, settings):
        return settings.long_break_seconds, True
    return settings.break_seconds, False
