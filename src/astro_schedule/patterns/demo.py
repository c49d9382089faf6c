# src/astro_schedule/patterns/demo.py

"""Console entrypoint that runs every pattern demo in turn."""

from __future__ import annotations

import logging

from ..logging_setup import setup_logging
from . import behavioral, creational, structural
from .behavioral import Emit

logger = logging.getLogger(__name__)

DEMOS = {
    "behavioral": behavioral.run_demo,
    "creational": creational.run_demo,
    "structural": structural.run_demo,
}


def run_all(emit: Emit = print) -> None:
    for i, (name, run) in enumerate(DEMOS.items()):
        if i:
            emit("")
        logger.debug("Running %s demo", name)
        run(emit)


def main() -> None:
    setup_logging(log_to_file=False)
    run_all()


if __name__ == "__main__":
    main()
