"""Timer settings with JSON persistence through a key-value port.

Settings are stored under ``SETTINGS_KEY`` as a JSON object::

    {"studyMinutes": 25, "breakMinutes": 5,
     "longBreakMinutes": 15, "sessionsBeforeLongBreak": 4}

Usage::

    settings = load_settings(store)
    settings = validate({**settings.to_dict(), "studyMinutes": 50})
    save_settings(store, settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .errors import InvalidConfiguration, PersistenceError
from .storage.port import SETTINGS_KEY, PersistencePort

logger = logging.getLogger("studyplanner.settings")

# field name → wire (JSON) name
_WIRE_NAMES: dict[str, str] = {
    "study_minutes": "studyMinutes",
    "break_minutes": "breakMinutes",
    "long_break_minutes": "longBreakMinutes",
    "sessions_before_long_break": "sessionsBeforeLongBreak",
}


@dataclass(frozen=True)
class TimerSettings:
    """Durations and long-break cadence.  Immutable for a session."""

    study_minutes: int = 25
    break_minutes: int = 5
    long_break_minutes: int = 15
    sessions_before_long_break: int = 4

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_positive_int(getattr(self, f.name), _WIRE_NAMES[f.name])

    @property
    def study_seconds(self) -> int:
        return self.study_minutes * 60

    @property
    def break_seconds(self) -> int:
        return self.break_minutes * 60

    @property
    def long_break_seconds(self) -> int:
        return self.long_break_minutes * 60

    def to_dict(self) -> dict[str, int]:
        """Wire form, as stored by :func:`save_settings`."""
        return {
            wire: getattr(self, name) for name, wire in _WIRE_NAMES.items()
        }


def _check_positive_int(value: Any, wire_name: str) -> int:
    # bool is an int subclass; True is not a duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(
            f"{wire_name} must be an integer, got {value!r}",
            field=wire_name,
        )
    if value <= 0:
        raise InvalidConfiguration(
            f"{wire_name} must be positive, got {value}",
            field=wire_name,
        )
    return value


DEFAULT_SETTINGS = TimerSettings()


def validate(raw: Any) -> TimerSettings:
    """Build a :class:`TimerSettings` from *raw*, rejecting bad input.

    *raw* is a mapping keyed by wire names (``studyMinutes``) or field
    names (``study_minutes``).  Unknown keys are ignored.  Missing,
    non-integer, zero or negative values raise
    :class:`InvalidConfiguration`; nothing is coerced.
    """
    if not isinstance(raw, Mapping):
        raise InvalidConfiguration(
            f"settings must be an object, got {type(raw).__name__}"
        )

    values: dict[str, int] = {}
    for name, wire in _WIRE_NAMES.items():
        if wire in raw:
            value = raw[wire]
        elif name in raw:
            value = raw[name]
        else:
            raise InvalidConfiguration(f"{wire} is missing", field=wire)
        values[name] = _check_positive_int(value, wire)
    return TimerSettings(**values)


def load_settings(port: PersistencePort) -> TimerSettings:
    """Load settings from *port*, falling back to defaults.

    Absent, unparsable or invalid data never fails the caller.
    """
    try:
        text = port.get(SETTINGS_KEY)
    except Exception as exc:
        logger.warning("Could not read timer settings, using defaults: %s", exc)
        return DEFAULT_SETTINGS

    if text is None:
        return DEFAULT_SETTINGS

    try:
        return validate(json.loads(text))
    except (ValueError, TypeError) as exc:
        # json.JSONDecodeError and InvalidConfiguration are both ValueErrors
        logger.warning("Ignoring stored timer settings, using defaults: %s", exc)
        return DEFAULT_SETTINGS


def save_settings(port: PersistencePort, settings: TimerSettings) -> None:
    """Write *settings* to *port* as JSON."""
    try:
        port.set(SETTINGS_KEY, json.dumps(settings.to_dict()))
    except Exception as exc:
        raise PersistenceError(f"could not save timer settings: {exc}") from exc
