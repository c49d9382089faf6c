"""Core types shared by every layer (errors, ports, app state)."""
