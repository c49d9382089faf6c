# src/astro_schedule/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import time
from enum import StrEnum

from ..core.errors import AlreadyCompletedError, ScheduleError, ValidationError

TIME_FORMAT = "%H:%M"


class Priority(StrEnum):
    """Task priority. Values double as the display form."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, raw: str | None) -> Priority:
        text = (raw or "").strip().lower()
        for p in cls:
            if p.value.lower() == text:
                return p
        raise ValidationError("Invalid priority level. Use Low, Medium, or High.")


@dataclass(slots=True, frozen=True)
class Task:
    """
    One time-boxed activity of the day.

    Frozen: completing or editing a task builds a new Task that the store swaps in
    at the same place.
    """

    description: str
    start: time
    end: time
    priority: Priority
    completed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", (self.description or "").strip())
        if not self.description:
            raise ValidationError("Task description must not be empty.")
        if self.end <= self.start:
            raise ValidationError("End time must be after start time.")

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.description.casefold()

    @property
    def status(self) -> str:
        return "Completed" if self.completed else "Pending"

    def overlaps(self, other: Task) -> bool:
        # Half-open intervals: touching endpoints are fine.
        return self.start < other.end and self.end > other.start

    def mark_completed(self) -> Task:
        if self.completed:
            raise AlreadyCompletedError(f"Task '{self.description}' is already completed.")
        return replace(self, completed=True)

    def __str__(self) -> str:
        return (
            f"{self.start.strftime(TIME_FORMAT)} - {self.end.strftime(TIME_FORMAT)}: "
            f"{self.description} [{self.priority.value}] - {self.status}"
        )


@dataclass(slots=True, frozen=True)
class Outcome:
    """
    Result of a schedule operation.

    `message` is the notification text that was published for it.
    `error` is set when the operation was rejected and nothing changed.
    """

    message: str
    task: Task | None = None
    error: ScheduleError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Task | None:
        if self.error is not None:
            raise self.error
        return self.task
