# src/astro_schedule/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.errors import (
    AlreadyCompletedError,
    ConflictError,
    NotFoundError,
    ParseError,
    ScheduleError,
    ValidationError,
)
from ..core.ports import Prompt
from ..core.state import AppState
from ..tasks.task_models import Outcome, Priority, Task

CommandHandler = Callable[[AppState, Prompt], str]

logger = logging.getLogger(__name__)

PRIORITY_HINT = "Low, Medium, High"

_ERROR_PREFIXES: list[tuple[type[ScheduleError], str]] = [
    (ParseError, "Input Error"),
    (ValidationError, "Argument Error"),
    (ConflictError, "Operation Error"),
    (AlreadyCompletedError, "Operation Error"),
    (NotFoundError, "Lookup Error"),
]


def describe_error(err: ScheduleError) -> str:
    """Human-readable message for an error, prefixed by its category."""
    for kind, prefix in _ERROR_PREFIXES:
        if isinstance(err, kind):
            return f"{prefix}: {err}"
    return f"Error: {err}"


class CommandRegistry:
    """Command registry used by the console loop (add, view, help, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(self, state: AppState, line: str, ask: Prompt) -> str:
        """
        Handle one command line like "add" or "view_priority".
        Expected schedule errors become a category message; anything else propagates.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return "No command entered. Please try again."

        name = parts[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            return "Invalid command. Type 'help' to see available commands."

        try:
            return handler(state, ask)
        except ScheduleError as e:
            logger.error("Command %s failed: %s", name, e)
            return describe_error(e)

    def build_help(self) -> str:
        lines = ["Available Commands:"]
        for i, (name, help_text) in enumerate(self._help.items(), start=1):
            lines.append(f"{i}. {name:<15}- {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _report(outcome: Outcome, success: str) -> str:
    if outcome.error is not None:
        return describe_error(outcome.error)
    return success


def _listing(header: str, tasks: Iterable[Task]) -> str:
    return "\n".join([header, *(str(t) for t in tasks)])


def cmd_add(state: AppState, ask: Prompt) -> str:
    description = ask("Enter task description: ")
    start = ask("Enter start time (HH:MM): ")
    end = ask("Enter end time (HH:MM): ")
    priority = ask(f"Enter priority level ({PRIORITY_HINT}): ")

    outcome = state.schedule.add_from_input(description, start, end, priority)
    return _report(outcome, "Task added successfully. No conflicts.")


def cmd_remove(state: AppState, ask: Prompt) -> str:
    description = ask("Enter task description to remove: ")
    return _report(state.schedule.remove(description), "Task removed successfully.")


def cmd_edit(state: AppState, ask: Prompt) -> str:
    description = ask("Enter task description to edit: ")
    new_description = ask("Enter new task description: ")
    new_start = ask("Enter new start time (HH:MM): ")
    new_end = ask("Enter new end time (HH:MM): ")
    new_priority = ask(f"Enter new priority level ({PRIORITY_HINT}): ")

    outcome = state.schedule.edit(description, new_description, new_start, new_end, new_priority)
    return _report(outcome, "Task edited successfully. No conflicts.")


def cmd_complete(state: AppState, ask: Prompt) -> str:
    description = ask("Enter task description to mark as completed: ")
    return _report(state.schedule.complete(description), "Task marked as completed.")


def cmd_view(state: AppState, ask: Prompt) -> str:
    tasks = state.schedule.list_tasks()
    if not tasks:
        logger.info("Viewed all tasks. Schedule is empty.")
        return "No tasks scheduled for the day."
    logger.info("Viewed all tasks.")
    return _listing("Scheduled Tasks:", tasks)


def cmd_view_priority(state: AppState, ask: Prompt) -> str:
    raw = ask(f"Enter priority level to view ({PRIORITY_HINT}): ")
    try:
        priority = Priority.parse(raw)
    except ValidationError as e:
        # Not an error for the loop: just tell the user and move on.
        logger.info("view_priority with invalid priority %r", raw)
        return str(e)

    tasks = state.schedule.list_by_priority(priority)
    if not tasks:
        logger.info("Viewed tasks by priority '%s'. No matching tasks found.", priority)
        return f"No tasks with priority '{priority}' scheduled for the day."
    logger.info("Viewed tasks by priority '%s'.", priority)
    return _listing(f"Scheduled Tasks with Priority '{priority}':", tasks)


def cmd_help(state: AppState, ask: Prompt) -> str:
    return registry.build_help()


def cmd_exit(state: AppState, ask: Prompt) -> str:
    # The console loop stops on this command; the handler only supplies the text.
    return "Exiting the application."


EXIT_COMMANDS = ("exit", "quit")

registry.register("add", cmd_add, help_text="Add a new task")
registry.register("remove", cmd_remove, help_text="Remove an existing task")
registry.register("edit", cmd_edit, help_text="Edit an existing task")
registry.register("complete", cmd_complete, help_text="Mark a task as completed")
registry.register("view", cmd_view, help_text="View all tasks")
registry.register("view_priority", cmd_view_priority, help_text="View tasks by priority level")
registry.register("help", cmd_help, help_text="Display available commands", aliases=["?"])
registry.register("exit", cmd_exit, help_text="Exit the application", aliases=["quit"])
