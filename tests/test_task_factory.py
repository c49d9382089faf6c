# tests/test_task_factory.py

from __future__ import annotations

from datetime import time

import pytest

from astro_schedule.core.errors import ParseError, ValidationError
from astro_schedule.tasks.task_factory import create_task, parse_time
from astro_schedule.tasks.task_models import Priority, Task


def test_create_task_parses_fields() -> None:
    task = create_task("  Sleep ", "00:00", "6:00", "low")

    assert task.description == "Sleep"
    assert task.start == time(0, 0)
    assert task.end == time(6, 0)
    assert task.priority is Priority.LOW
    assert task.completed is False


@pytest.mark.parametrize("raw", ["", "7", "7:5", "12:5", "25:00", "12:60", "noon", "12-30"])
def test_parse_time_rejects_malformed(raw: str) -> None:
    with pytest.raises(ParseError):
        parse_time(raw)


def test_bad_start_and_end_are_parse_errors() -> None:
    with pytest.raises(ParseError, match="start time"):
        create_task("x", "9am", "10:00", "High")
    with pytest.raises(ParseError, match="end time"):
        create_task("x", "09:00", "ten", "High")


def test_priority_is_case_insensitive_and_validated() -> None:
    assert Priority.parse("HIGH") is Priority.HIGH
    assert Priority.parse(" medium ") is Priority.MEDIUM
    with pytest.raises(ValidationError):
        create_task("x", "09:00", "10:00", "urgent")


@pytest.mark.parametrize("start,end", [("10:00", "10:00"), ("11:00", "10:00")])
def test_inverted_or_empty_interval_is_rejected(start: str, end: str) -> None:
    with pytest.raises(ValidationError, match="End time must be after start time"):
        create_task("x", start, end, "Low")


def test_blank_description_is_rejected() -> None:
    with pytest.raises(ValidationError):
        create_task("   ", "09:00", "10:00", "Low")


def test_display_line_format() -> None:
    task = Task("Morning Exercise", time(7, 0), time(8, 0), Priority.HIGH)
    assert str(task) == "07:00 - 08:00: Morning Exercise [High] - Pending"

    done = task.mark_completed()
    assert str(done) == "07:00 - 08:00: Morning Exercise [High] - Completed"
    assert str(task) == "07:00 - 08:00: Morning Exercise [High] - Pending"


def test_overlap_is_half_open() -> None:
    a = create_task("a", "00:00", "06:00", "Low")
    touching = create_task("b", "06:00", "07:00", "Low")
    crossing = create_task("c", "05:00", "06:30", "Low")

    assert not a.overlaps(touching)
    assert not touching.overlaps(a)
    assert a.overlaps(crossing)
    assert crossing.overlaps(a)


def test_single_digit_hour_is_accepted() -> None:
    assert parse_time("7:05") == time(7, 5)
    assert parse_time(" 23:59 ") == time(23, 59)
