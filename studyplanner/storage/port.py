"""Key-value persistence port and the simple stores behind it.

The timer core only ever sees ``get``/``set`` on string values; what
sits behind them (a dict, a JSON file, a SQLite table) is the host's
choice.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol, runtime_checkable

# ── keys ─────────────────────────────────────────────────────────────────

TASKS_KEY = "studyTasks"              # owned by the task list, not the timer
SETTINGS_KEY = "studyTimerSettings"
STATE_KEY = "studyTimerState"


@runtime_checkable
class PersistencePort(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store.  Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """All keys in one JSON object on disk.

    A missing or unreadable file reads as empty; writes replace the file.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(data, indent=2) + "\n",
            encoding="utf-8",
        )
