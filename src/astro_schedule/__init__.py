"""Astronaut daily schedule organizer."""

__version__ = "0.1.0"
