# src/astro_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The schedule depends on Protocols instead of concrete listeners, so a logging
sink, a test recorder or anything else with an `update` method can subscribe.
"""

from typing import Callable, Protocol

Prompt = Callable[[str], str]
# Asks the user for one field: prompt text in, stripped answer out.


class Listener(Protocol):
    """Receives schedule change notifications as plain text."""
    def update(self, message: str) -> None: ...
