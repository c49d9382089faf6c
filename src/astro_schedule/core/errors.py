# src/astro_schedule/core/errors.py

"""
Error kinds for the schedule.

All of them are local, recoverable conditions: the command layer reports them
and keeps the loop running.
"""

from __future__ import annotations


class ScheduleError(Exception):
    """Base class for every expected schedule failure."""


class ParseError(ScheduleError):
    """Malformed time-of-day text."""


class ValidationError(ScheduleError):
    """Bad priority text, blank description or an inverted interval."""


class ConflictError(ScheduleError):
    """The task interval overlaps an existing task."""


class NotFoundError(ScheduleError):
    """No task with the given description."""


class AlreadyCompletedError(ScheduleError):
    """The task was completed before."""
