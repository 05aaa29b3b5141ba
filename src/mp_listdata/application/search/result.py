"""Application search – SearchResult and SearchMetrics containers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["SearchMetrics", "SearchResult"]


@dataclass
class SearchResult(Generic[T]):
    """A record with its relevance score and per-field highlighted snippets."""
    record: T
    score: float
    highlights: dict[str, str] = field(default_factory=dict)


@dataclass
class SearchMetrics:
    total_results: int = 0
    query_time_ms: float = 0.0
    top_terms: list[str] = field(default_factory=list)
    field_match_counts: dict[str, int] = field(default_factory=dict)
