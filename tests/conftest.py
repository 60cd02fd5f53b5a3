"""Shared pytest fixtures for StudyPlanner tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from studyplanner.settings import TimerSettings
from studyplanner.storage.db import configure_engine, init_db
from studyplanner.storage.port import MemoryStore
from studyplanner.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def settings():
    """Default 25 / 5 / 15 / 4 settings."""
    return TimerSettings()


@pytest.fixture
def engine(qapp, settings):
    """Fresh TimerEngine on default settings."""
    return TimerEngine(settings)


@pytest.fixture
def short_engine(qapp):
    """TimerEngine with 1-minute phases and a long break every 2 sessions."""
    return TimerEngine(
        TimerSettings(
            study_minutes=1,
            break_minutes=1,
            long_break_minutes=2,
            sessions_before_long_break=2,
        )
    )


@pytest.fixture
def store():
    return MemoryStore()
