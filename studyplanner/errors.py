"""Error taxonomy for StudyPlanner.

Nothing here is fatal: every error is raised to the caller of the
operation that failed, and the timer keeps its last good state.
"""

from __future__ import annotations


class StudyPlannerError(Exception):
    """Base class for all StudyPlanner errors."""


class InvalidConfiguration(StudyPlannerError, ValueError):
    """Timer settings failed validation.

    ``field`` names the offending setting (wire name), or ``None`` when the
    payload as a whole was unusable.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidTransition(StudyPlannerError):
    """The requested operation is not valid from the current timer state."""


class PersistenceError(StudyPlannerError):
    """Writing to the persistence port failed."""
