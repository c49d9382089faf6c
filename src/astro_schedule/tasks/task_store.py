# src/astro_schedule/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator

from ..core.errors import (
    AlreadyCompletedError,
    ConflictError,
    NotFoundError,
    ScheduleError,
)
from ..core.ports import Listener
from .notifications import NotificationChannel
from .task_factory import create_task
from .task_models import Outcome, Priority, Task

logger = logging.getLogger(__name__)


class TaskView:
    """
    Lazy, restartable view over the schedule.

    Nothing is copied until iteration starts; every `iter()` starts over from
    the current state of the store.
    """

    def __init__(self, source: Callable[[], list[Task]], where: Callable[[Task], bool] | None = None) -> None:
        self._source = source
        self._where = where

    def __iter__(self) -> Iterator[Task]:
        for task in tuple(self._source()):
            if self._where is None or self._where(task):
                yield task

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


class ScheduleStore:
    """
    In-memory schedule for one day.

    Invariants:
    - tasks are sorted by start time after every mutation (stable: equal starts
      keep insertion order)
    - no two tasks overlap on [start, end)
    - descriptions are unique, case-insensitively

    Operations return an Outcome instead of raising for expected failures.
    Every failure is published on the channel (as "Error: ...") before the
    Outcome is returned.

    Thread-safety:
    - mutations run under one re-entrant lock per store
    """

    def __init__(self, channel: NotificationChannel | None = None) -> None:
        self._tasks: list[Task] = []
        self._channel = channel if channel is not None else NotificationChannel()
        self._lock = threading.RLock()

    # ---- listeners ----

    @property
    def channel(self) -> NotificationChannel:
        return self._channel

    def subscribe(self, listener: Listener) -> None:
        self._channel.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._channel.unsubscribe(listener)

    # ---- low-level helpers ----

    def _index_of(self, description: str) -> int | None:
        key = (description or "").strip().casefold()
        for i, task in enumerate(self._tasks):
            if task.key == key:
                return i
        return None

    def _conflicts(self, candidate: Task) -> bool:
        return any(candidate.overlaps(task) for task in self._tasks)

    def _duplicate_of(self, candidate: Task) -> Task | None:
        for task in self._tasks:
            if task.key == candidate.key:
                return task
        return None

    def _sort(self) -> None:
        self._tasks.sort(key=lambda t: t.start)

    def _fail(self, message: str, error: ScheduleError, log_msg: str, *args: object) -> Outcome:
        self._channel.publish(message)
        logger.error(log_msg, *args)
        return Outcome(message=message, error=error)

    def _succeed(self, message: str, task: Task) -> Outcome:
        self._channel.publish(message)
        return Outcome(message=message, task=task)

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def find(self, description: str) -> Task | None:
        idx = self._index_of(description)
        return None if idx is None else self._tasks[idx]

    def list_tasks(self) -> TaskView:
        return TaskView(lambda: self._tasks)

    def list_by_priority(self, priority: Priority) -> TaskView:
        return TaskView(lambda: self._tasks, lambda t: t.priority == priority)

    # ---- mutations ----

    def add(self, task: Task) -> Outcome:
        with self._lock:
            if self._conflicts(task):
                return self._fail(
                    f"Error: Task '{task.description}' conflicts with existing tasks.",
                    ConflictError(f"Task '{task.description}' conflicts with existing tasks."),
                    "Add rejected (conflict) description=%r %s-%s",
                    task.description,
                    task.start,
                    task.end,
                )

            if self._duplicate_of(task) is not None:
                return self._fail(
                    f"Error: Task '{task.description}' already exists.",
                    ConflictError(f"Task '{task.description}' already exists."),
                    "Add rejected (duplicate) description=%r",
                    task.description,
                )

            self._tasks.append(task)
            self._sort()
            logger.info("Task added description=%r total=%d", task.description, len(self._tasks))
            return self._succeed(f"Task '{task.description}' has been added.", task)

    def add_from_input(self, description: str, start: str, end: str, priority: str) -> Outcome:
        """Build a task from raw text and add it; bad input is published like any other failure."""
        with self._lock:
            try:
                task = create_task(description, start, end, priority)
            except ScheduleError as e:
                return self._fail(
                    f"Error: Task '{description}' could not be added: {e}",
                    e,
                    "Add rejected (invalid input) description=%r: %s",
                    description,
                    e,
                )
            return self.add(task)

    def remove(self, description: str) -> Outcome:
        with self._lock:
            idx = self._index_of(description)
            if idx is None:
                return self._not_found(description, "remove")

            task = self._tasks.pop(idx)
            logger.info("Task removed description=%r total=%d", task.description, len(self._tasks))
            return self._succeed(f"Task '{description}' has been removed.", task)

    def edit(
        self,
        description: str,
        new_description: str,
        new_start: str,
        new_end: str,
        new_priority: str,
    ) -> Outcome:
        """
        Replace a task atomically: either the new task takes the old one's
        place, or the schedule is left exactly as it was.
        """
        with self._lock:
            idx = self._index_of(description)
            if idx is None:
                return self._not_found(description, "edit")

            try:
                candidate = create_task(new_description, new_start, new_end, new_priority)
            except ScheduleError as e:
                return self._fail(
                    f"Error: Task '{description}' could not be edited: {e}",
                    e,
                    "Edit rejected (invalid input) description=%r: %s",
                    description,
                    e,
                )

            original = self._tasks.pop(idx)
            reason: ScheduleError | None = None
            if self._conflicts(candidate):
                reason = ConflictError(f"Task '{candidate.description}' conflicts with existing tasks.")
            elif self._duplicate_of(candidate) is not None:
                reason = ConflictError(f"Task '{candidate.description}' already exists.")

            if reason is not None:
                self._tasks.insert(idx, original)
                return self._fail(
                    f"Error: {reason}",
                    reason,
                    "Edit rejected description=%r -> %r: %s",
                    description,
                    candidate.description,
                    reason,
                )

            self._tasks.append(candidate)
            self._sort()
            logger.info("Task edited description=%r -> %r", original.description, candidate.description)
            return self._succeed(
                f"Task '{description}' has been edited to '{candidate.description}'.", candidate
            )

    def complete(self, description: str) -> Outcome:
        with self._lock:
            idx = self._index_of(description)
            if idx is None:
                return self._not_found(description, "complete")

            try:
                task = self._tasks[idx].mark_completed()
            except AlreadyCompletedError as e:
                return self._fail(
                    f"Error: Task '{description}' is already completed.",
                    e,
                    "Complete rejected (already completed) description=%r",
                    description,
                )

            self._tasks[idx] = task
            logger.info("Task completed description=%r", task.description)
            return self._succeed(f"Task '{description}' has been marked as completed.", task)

    def _not_found(self, description: str, action: str) -> Outcome:
        return self._fail(
            f"Error: Task '{description}' not found.",
            NotFoundError(f"Task '{description}' not found."),
            "%s rejected (not found) description=%r",
            action.capitalize(),
            description,
        )
