"""Field-name conversions between snake_case paths and native record names."""
from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_snake_case(name: str) -> str:
    """``firstName`` / ``FirstName`` → ``first_name``; snake_case is returned unchanged."""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    return _WORD_BOUNDARY.sub(r"\1_\2", name).lower()


def to_camel_case(name: str) -> str:
    """``first_name`` → ``firstName``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest if part)


def to_pascal_case(name: str) -> str:
    """``first_name`` → ``FirstName``."""
    camel = to_camel_case(name)
    return camel[:1].upper() + camel[1:]


def fold_name(name: str) -> str:
    """Case- and underscore-insensitive form: ``URLTitle``, ``url_title`` → ``urltitle``."""
    return name.replace("_", "").lower()


def name_variants(segment: str) -> list[str]:
    """Candidate native names for one path segment, most specific first."""
    variants: list[str] = []
    for candidate in (segment, to_camel_case(segment), to_pascal_case(segment)):
        if candidate and candidate not in variants:
            variants.append(candidate)
    return variants


__all__ = ["fold_name", "name_variants", "to_camel_case", "to_pascal_case", "to_snake_case"]
