"""Application search – query tokenisation and top-term extraction."""
from __future__ import annotations

from collections.abc import Iterable

__all__ = ["TRIM_CHARS", "extract_top_terms", "tokenize"]

TRIM_CHARS = ".,!?;:"


def tokenize(query: str) -> list[str]:
    """Split on whitespace, trim surrounding punctuation, drop empties."""
    tokens: list[str] = []
    for part in query.split():
        part = part.strip(TRIM_CHARS)
        if part:
            tokens.append(part)
    return tokens


def extract_top_terms(
    tokens: Iterable[str],
    stop_words: frozenset[str],
    min_length: int = 3,
) -> list[str]:
    """Lower-cased, de-duplicated tokens of at least *min_length*, minus stop words."""
    seen: set[str] = set()
    terms: list[str] = []
    for token in tokens:
        term = token.lower()
        if len(term) < min_length or term in stop_words or term in seen:
            continue
        seen.add(term)
        terms.append(term)
    return terms
