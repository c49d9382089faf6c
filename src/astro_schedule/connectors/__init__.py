"""User-facing front ends (console)."""
