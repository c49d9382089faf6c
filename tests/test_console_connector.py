# tests/test_console_connector.py

from __future__ import annotations

from astro_schedule.cli import commands
from astro_schedule.connectors.console_connector import BANNER, run_console_loop

from .fakes import ScriptedInput


def _run(state, answers: list[str]) -> tuple[list[str], ScriptedInput]:
    out: list[str] = []
    read = ScriptedInput(answers)
    run_console_loop(state, read=read, write=out.append)
    return out, read


def test_session_until_exit(state) -> None:
    out, read = _run(
        state,
        [
            "add", "Sleep", "00:00", "06:00", "Low",
            "add", "Exercise", "06:00", "07:00", "Medium",
            "add", "Report", "05:00", "06:30", "High",
            "view",
            "exit",
            "view",  # never read
        ],
    )

    assert out == [
        "Task added successfully. No conflicts.",
        "Task added successfully. No conflicts.",
        "Operation Error: Task 'Report' conflicts with existing tasks.",
        "Scheduled Tasks:\n"
        "00:00 - 06:00: Sleep [Low] - Pending\n"
        "06:00 - 07:00: Exercise [Medium] - Pending",
        "Exiting the application.",
    ]
    assert read.prompts[1] == "Enter task description: "


def test_eof_ends_loop_quietly(state) -> None:
    out, _ = _run(state, ["", "bogus"])

    assert out == [
        "No command entered. Please try again.",
        "Invalid command. Type 'help' to see available commands.",
    ]


def test_eof_in_the_middle_of_a_command_ends_loop(state) -> None:
    out, _ = _run(state, ["add", "Sleep"])
    assert out == []
    assert len(state.schedule) == 0


def test_banner_and_help_when_enabled(state) -> None:
    state.settings.show_banner = True
    out, _ = _run(state, ["quit"])

    assert out[0] == BANNER
    assert out[1].startswith("Available Commands:")
    assert out[-1] == "Exiting the application."


def test_unexpected_handler_crash_is_reported(state, monkeypatch) -> None:
    def boom(state, ask):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "view", boom)
    out, _ = _run(state, ["view", "exit"])

    assert out == ["Internal error while handling a command.", "Exiting the application."]
