"""Console entrypoint, composition root and command registry."""
