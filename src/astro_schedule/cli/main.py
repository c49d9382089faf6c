# src/astro_schedule/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console command loop
in the main thread until `exit` or end of input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye. Tasks at exit: %d", len(state.schedule))


if __name__ == "__main__":
    main()
