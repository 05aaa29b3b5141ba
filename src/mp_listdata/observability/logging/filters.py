"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

# Search text and cursor tokens can carry user data.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "query", "token", "cursor", "next_cursor", "password", "secret", "api_key", "authorization",
})


class SensitiveFieldsFilter:
    """structlog processor masking the values of sensitive keys.

    Keys match case-insensitively at any depth, including dicts nested
    inside lists and tuples.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(name.lower() for name in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._fields

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {key: self.REDACTED if self.is_sensitive(key) else self._walk(value) for key, value in data.items()}

    def _walk(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, list):
            return [self._walk(item) for item in value]
        if isinstance(value, tuple):
            return tuple(self._walk(item) for item in value)
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
