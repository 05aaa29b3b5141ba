"""Observability – structured logging for the list-data engine."""
