# src/astro_schedule/tasks/notifications.py

from __future__ import annotations

"""
Notification channel.

Synchronous publish/subscribe between the schedule and its listeners:
- listeners are called in subscription order,
- subscribing twice / unsubscribing a stranger is a no-op,
- listener exceptions are NOT caught here; they reach whoever published.
"""

import logging

from ..core.ports import Listener

logger = logging.getLogger(__name__)


class NotificationChannel:
    def __init__(self) -> None:
        # Keyed by identity: listeners do not have to be hashable.
        self._listeners: dict[int, Listener] = {}

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return id(listener) in self._listeners

    def subscribe(self, listener: Listener) -> None:
        if id(listener) in self._listeners:
            return
        self._listeners[id(listener)] = listener
        logger.debug("Listener subscribed: %r (total=%d)", listener, len(self._listeners))

    def unsubscribe(self, listener: Listener) -> None:
        if self._listeners.pop(id(listener), None) is not None:
            logger.debug("Listener unsubscribed: %r (total=%d)", listener, len(self._listeners))

    def publish(self, message: str) -> None:
        # Snapshot: a listener may (un)subscribe while being notified.
        for listener in list(self._listeners.values()):
            listener.update(message)


class LoggingListener:
    """Forwards every notification to logging, picking the level from the message prefix."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logging.getLogger(f"{__name__}.sink")

    def update(self, message: str) -> None:
        head = message.lstrip().lower()
        if head.startswith("error"):
            self._log.error(message)
        elif head.startswith("warn"):
            self._log.warning(message)
        else:
            self._log.info(message)
