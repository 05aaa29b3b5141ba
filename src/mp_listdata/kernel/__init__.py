"""Kernel – errors, field values and reflective field access."""
