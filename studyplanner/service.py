"""Study timer control surface.

Ties the engine to its settings and the persistence port.  The UI talks
to this object only: ``start``, ``pause``, ``stop``, ``update_settings``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .errors import InvalidTransition, PersistenceError
from .settings import TimerSettings, load_settings, save_settings, validate
from .storage.port import STATE_KEY, PersistencePort
from .timer.engine import TimerEngine
from .timer.state import TimerSnapshot


class StudyTimer:
    """Engine + settings + persistence, as one unit the UI can drive."""

    def __init__(
        self,
        port: PersistencePort,
        *,
        engine: TimerEngine | None = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._port = port
        self._logger = logger or logging.getLogger("studyplanner.service")
        settings = load_settings(port)
        if engine is None:
            engine = TimerEngine(settings, logger=logger)
        else:
            engine.apply_settings(settings)
        self._engine = engine

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def settings(self) -> TimerSettings:
        return self._engine.settings

    def snapshot(self) -> TimerSnapshot:
        return self._engine.snapshot()

    # ── controls ──────────────────────────────────────────────────────

    def start(self) -> None:
        self._engine.start()

    def pause(self) -> None:
        self._engine.pause()

    def stop(self) -> None:
        self._engine.stop()

    def update_settings(self, raw: Any) -> TimerSettings:
        """Validate, apply (resetting the timer), then persist *raw*.

        Invalid input raises :class:`InvalidConfiguration` and leaves the
        current settings in place.  A failed write raises
        :class:`PersistenceError` after the new settings are already in
        effect.
        """
        settings = raw if isinstance(raw, TimerSettings) else validate(raw)
        self._engine.apply_settings(settings)
        save_settings(self._port, settings)
        return settings

    # ── timer state persistence ───────────────────────────────────────

    def save_state(self) -> None:
        """Store the current snapshot so a later run can pick it up."""
        payload = self._engine.snapshot().to_dict()
        try:
            self._port.set(STATE_KEY, json.dumps(payload))
        except Exception as exc:
            raise PersistenceError(f"could not save timer state: {exc}") from exc

    def restore_state(self) -> bool:
        """Restore a saved snapshot (paused).  Returns True on success.

        Missing, corrupt or stale state is ignored.
        """
        try:
            text = self._port.get(STATE_KEY)
        except Exception as exc:
            self._logger.warning("Could not read saved timer state: %s", exc)
            return False
        if text is None:
            return False

        try:
            payload = json.loads(text)
            if not isinstance(payload, dict):
                raise InvalidTransition("saved timer state is not an object")
            self._engine.restore(payload)
        except (ValueError, InvalidTransition) as exc:
            self._logger.warning("Ignoring saved timer state: %s", exc)
            return False
        return True
