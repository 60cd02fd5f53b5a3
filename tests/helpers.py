"""Shared test helpers for StudyPlanner."""

from studyplanner.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_phase(engine: TimerEngine) -> None:
    """Start the current phase and tick it all the way through."""
    engine.start()
    for _ in range(engine.total_seconds):
        engine.tick()


def complete_phase(engine: TimerEngine) -> None:
    """Fast-complete the current phase by jumping to the last tick."""
    engine.start()
    engine._state.remaining_seconds = 1
    engine.tick()


class FailingStore:
    """Persistence port whose reads and/or writes blow up."""

    def __init__(self, *, fail_get: bool = False, fail_set: bool = True):
        self._data: dict[str, str] = {}
        self._fail_get = fail_get
        self._fail_set = fail_set

    def get(self, key):
        if self._fail_get:
            raise OSError("store unavailable")
        return self._data.get(key)

    def set(self, key, value):
        if self._fail_set:
            raise OSError("disk full")
        self._data[key] = value
