"""Storage package."""

from .db import SqlStore, configure_engine, get_session, init_db
from .models import KeyValue
from .port import (
    SETTINGS_KEY,
    STATE_KEY,
    TASKS_KEY,
    JsonFileStore,
    MemoryStore,
    PersistencePort,
)

__all__ = [
    "SqlStore",
    "configure_engine",
    "get_session",
    "init_db",
    "KeyValue",
    "SETTINGS_KEY",
    "STATE_KEY",
    "TASKS_KEY",
    "JsonFileStore",
    "MemoryStore",
    "PersistencePort",
]
