# src/astro_schedule/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import ScheduleStore


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: object

    schedule: ScheduleStore
