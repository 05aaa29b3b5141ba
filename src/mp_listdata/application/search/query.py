"""Application search – SearchRequest and SearchOptions value objects."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

__all__ = ["SearchOptions", "SearchRequest"]


@dataclass(frozen=True)
class SearchOptions:
    """Per-request search behaviour.

    ``search_fields`` empty means "every default searchable field of the
    record"; ``max_results`` of zero or less means no cap.
    """
    search_fields: tuple[str, ...] = ()
    field_weights: Mapping[str, float] = field(default_factory=dict)
    enable_fuzzy: bool = False
    enable_highlighting: bool = False
    max_results: int = 0

    def weight_of(self, field_name: str) -> float:
        return float(self.field_weights.get(field_name, 1.0))


@dataclass(frozen=True)
class SearchRequest:
    query: str = ""
    options: SearchOptions | None = None

    @property
    def effective_options(self) -> SearchOptions:
        return self.options if self.options is not None else SearchOptions()
