"""Application listdata – ProcessedResult."""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from mp_listdata.application.pagination import PaginationResponse
from mp_listdata.application.search import SearchMetrics, SearchResult

T = TypeVar("T")


@dataclasses.dataclass
class ProcessedResult(Generic[T]):
    """Outcome of one pipeline run.

    ``items`` and ``search_results`` are parallel: ``search_results[i].record``
    is ``items[i]``.
    """

    items: list[T]
    pagination: PaginationResponse
    search_results: list[SearchResult[T]]
    search_metrics: SearchMetrics

    @property
    def scores(self) -> list[float]:
        return [result.score for result in self.search_results]

    def map(self, fn: Callable[[T], Any]) -> ProcessedResult[Any]:
        """Return a new :class:`ProcessedResult` with each item transformed by *fn*."""
        mapped = [fn(item) for item in self.items]
        return ProcessedResult(
            items=mapped,
            pagination=self.pagination,
            search_results=[
                SearchResult(record=item, score=result.score, highlights=dict(result.highlights))
                for item, result in zip(mapped, self.search_results)
            ],
            search_metrics=self.search_metrics,
        )


__all__ = ["ProcessedResult"]
