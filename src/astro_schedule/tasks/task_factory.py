# src/astro_schedule/tasks/task_factory.py

from __future__ import annotations

from datetime import datetime, time

from ..core.errors import ParseError
from .task_models import TIME_FORMAT, Priority, Task


def parse_time(raw: str | None, *, field: str = "time") -> time:
    """Parse 'H:MM' / 'HH:MM' into a time of day (no date, no seconds)."""
    text = (raw or "").strip()
    # strptime alone would also take one-digit minutes ("7:5").
    if len(text.partition(":")[2]) != 2:
        raise ParseError(f"Invalid {field} format. Use HH:MM format.")
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except ValueError:
        raise ParseError(f"Invalid {field} format. Use HH:MM format.") from None


def create_task(description: str, start_text: str, end_text: str, priority_text: str) -> Task:
    """
    Build a validated Task from raw user input.

    Raises ParseError for bad times and ValidationError for a bad priority,
    a blank description or end <= start.
    """
    start = parse_time(start_text, field="start time")
    end = parse_time(end_text, field="end time")
    priority = Priority.parse(priority_text)
    return Task(description=description, start=start, end=end, priority=priority)
