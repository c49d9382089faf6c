# src/astro_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the one schedule store for this run,
- subscribes the logging listener to its notifications.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.notifications import LoggingListener
from ..tasks.task_store import ScheduleStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    schedule = ScheduleStore()
    schedule.subscribe(LoggingListener())
    logger.debug("Schedule store created, listeners=%d", len(schedule.channel))

    return AppState(settings=settings, schedule=schedule)
