"""Application search – SearchEngine.

Scores every record per searchable field: an exact, case-insensitive
substring hit of a query token is worth ``exact_match_score``; with fuzzy
matching enabled a miss can still contribute ``ratio * fuzzy_weight`` when
the matcher's ratio exceeds ``fuzzy_threshold``. Field scores are weighted
and summed. Results come back by descending score, ties in input order.
"""
from __future__ import annotations

import re
import time
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from mp_listdata.application.search.config import SearchConfig
from mp_listdata.application.search.query import SearchOptions, SearchRequest
from mp_listdata.application.search.result import SearchMetrics, SearchResult
from mp_listdata.application.search.tokenizer import extract_top_terms, tokenize
from mp_listdata.kernel.reflection import FieldAccessor
from mp_listdata.kernel.types import as_text
from mp_listdata.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["SearchEngine"]

logger = get_logger(__name__)


class SearchEngine(Generic[T]):
    """Full-text search over in-memory records."""

    def __init__(self, config: SearchConfig | None = None, accessor: FieldAccessor | None = None) -> None:
        self._config = config or SearchConfig()
        self._accessor = accessor or FieldAccessor()

    @property
    def config(self) -> SearchConfig:
        return self._config

    def search(
        self,
        records: Sequence[T],
        request: SearchRequest | None,
    ) -> tuple[list[SearchResult[T]], SearchMetrics]:
        tokens = tokenize(request.query) if request is not None else []
        if not tokens:
            return self.pass_through(records)

        started = time.perf_counter()
        options = request.effective_options
        field_match_counts: dict[str, int] = {}
        results: list[SearchResult[T]] = []
        for record in records:
            result = self._score_record(record, tokens, options, field_match_counts)
            if result is not None:
                results.append(result)

        results.sort(key=lambda result: result.score, reverse=True)
        if options.max_results > 0:
            results = results[: options.max_results]

        took_ms = (time.perf_counter() - started) * 1000.0
        metrics = SearchMetrics(
            total_results=len(results),
            query_time_ms=took_ms,
            top_terms=extract_top_terms(tokens, self._config.stop_words, self._config.min_term_length),
            field_match_counts=field_match_counts,
        )
        logger.debug(
            "listdata.search.completed",
            query=request.query,
            tokens=len(tokens),
            candidates=len(records),
            matched=len(results),
            took_ms=round(took_ms, 3),
        )
        return results, metrics

    def pass_through(self, records: Sequence[T]) -> tuple[list[SearchResult[T]], SearchMetrics]:
        """Wrap every record with score 1.0 and no highlights."""
        results = [SearchResult(record=record, score=1.0) for record in records]
        return results, SearchMetrics(total_results=len(results))

    def default_fields(self, record: Any) -> list[str]:
        """Fields searched when the request names none.

        A field qualifies when it holds a string, is declared ``str`` or
        ``Optional[str]``, or its name contains one of the text hints.
        """
        hints = self._config.text_field_hints
        return [
            info.name
            for info in self._accessor.field_names(record)
            if isinstance(info.value, str)
            or info.declared_text
            or any(hint in info.name.lower() for hint in hints)
        ]

    def score_text(self, text: str, tokens: Sequence[str], options: SearchOptions) -> tuple[float, str]:
        """Score one field's text; returns ``(score, first_highlight)``."""
        lowered = text.lower()
        score = 0.0
        highlight = ""
        for token in tokens:
            needle = token.lower()
            if needle in lowered:
                score += self._config.exact_match_score
                if options.enable_highlighting and not highlight:
                    highlight = self.highlight(text, token)
            elif options.enable_fuzzy:
                ratio = self._config.fuzzy_matcher(lowered, needle)
                if ratio > self._config.fuzzy_threshold:
                    score += ratio * self._config.fuzzy_weight
        return score, highlight

    def highlight(self, text: str, term: str) -> str:
        """Wrap the first occurrence of *term* in markers, with surrounding context."""
        match = re.search(re.escape(term), text, re.IGNORECASE)
        if match is None:
            return ""
        start, end = match.span()
        context = self._config.highlight_context
        prefix = text[max(0, start - context):start]
        suffix = text[end:end + context]
        return f"{prefix}{self._config.highlight_pre}{text[start:end]}{self._config.highlight_post}{suffix}"

    def _score_record(
        self,
        record: T,
        tokens: Sequence[str],
        options: SearchOptions,
        field_match_counts: dict[str, int],
    ) -> SearchResult[T] | None:
        fields = options.search_fields or self.default_fields(record)
        total = 0.0
        highlights: dict[str, str] = {}
        matched = False
        for field_name in fields:
            text = as_text(self._accessor.resolve(record, field_name))
            if not text:
                continue
            field_score, highlight = self.score_text(text, tokens, options)
            if field_score <= 0:
                continue
            matched = True
            field_match_counts[field_name] = field_match_counts.get(field_name, 0) + 1
            total += field_score * options.weight_of(field_name)
            if options.enable_highlighting and highlight:
                highlights[field_name] = highlight

        if not matched or total <= 0:
            return None
        return SearchResult(record=record, score=total, highlights=highlights)
