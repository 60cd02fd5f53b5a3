"""Timer package."""

from .clock import TICK_INTERVAL_MS, TimerClock
from .engine import TimerEngine
from .policy import is_long_break_due, next_duration
from .state import Phase, TimerSnapshot, TimerState

__all__ = [
    "TICK_INTERVAL_MS",
    "TimerClock",
    "TimerEngine",
    "is_long_break_due",
    "next_duration",
    "Phase",
    "TimerSnapshot",
    "TimerState",
]
