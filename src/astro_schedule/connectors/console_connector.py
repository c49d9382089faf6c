# src/astro_schedule/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_COMMANDS, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

BANNER = "===== Astronaut Daily Schedule Organizer ====="


def _stripped(read: Callable[[str], str]) -> Callable[[str], str]:
    def ask(prompt: str) -> str:
        return read(prompt).strip()

    return ask


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read a command, run it, print the reply; repeat until exit or end of input.

    `read`/`write` default to the terminal and are injectable for tests.
    """
    logger.info("Console loop started.")
    ask = _stripped(read)

    if getattr(state.settings, "show_banner", True):
        write(BANNER)
        write(command_registry.build_help())

    while True:
        try:
            line = ask("\nEnter command: ")
            name = line.split(maxsplit=1)[0].lower() if line else ""

            try:
                reply = command_registry.handle(state, line, ask)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception:
                logger.exception("Command handler crashed: %r", line)
                reply = "Internal error while handling a command."
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        write(reply)

        if name in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

    logger.info("Console loop finished.")
