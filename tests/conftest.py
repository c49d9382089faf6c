# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from astro_schedule.core.state import AppState
from astro_schedule.tasks.task_factory import create_task
from astro_schedule.tasks.task_store import ScheduleStore

from .fakes import RecordingListener


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    We intentionally use a SimpleNamespace rather than reading real env config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="astro-test",
        log_level="DEBUG",
        show_banner=False,
    )


@pytest.fixture()
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture()
def store(listener: RecordingListener) -> ScheduleStore:
    s = ScheduleStore()
    s.subscribe(listener)
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: ScheduleStore) -> AppState:
    return AppState(settings=settings, schedule=store)


@pytest.fixture()
def make_task():
    def _make(description: str, start: str, end: str, priority: str = "Medium"):
        return create_task(description, start, end, priority)

    return _make
