"""Application sorting – SortComparator.

Multi-field, stable ordering over heterogeneous records. Each pair of
values is compared as strings, numbers, timestamps or booleans when both
sides share that kind; mixed kinds fall back to ordering by kind name and
then by textual rendering, so sorting never fails on unexpected data.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import cmp_to_key
from typing import Any, TypeVar

from mp_listdata.application.search.result import SearchResult
from mp_listdata.application.sorting.sort_field import SortField, SortRequest
from mp_listdata.kernel.errors import InvalidSortError
from mp_listdata.kernel.reflection import FieldAccessor
from mp_listdata.kernel.types import (
    ABSENT,
    BoolValue,
    FieldValue,
    NumberValue,
    StringValue,
    TimestampValue,
    as_text,
)
from mp_listdata.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["SCORE_FIELD", "SortComparator", "compare_values"]

SCORE_FIELD = "_score"
"""Pseudo field that sorts :class:`SearchResult` items by relevance."""

logger = get_logger(__name__)


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _compare_present(left: FieldValue, right: FieldValue, sort_field: SortField) -> int:
    match (left, right):
        case (StringValue(a), StringValue(b)):
            if not sort_field.case_sensitive:
                a, b = a.lower(), b.lower()
            return _sign(a, b)
        case (NumberValue(a), NumberValue(b)):
            # int, float and Decimal order exactly against each other
            if sort_field.absolute:
                a, b = abs(a), abs(b)
            return _sign(a, b)
        case (TimestampValue(a), TimestampValue(b)):
            return _sign(a, b)
        case (BoolValue(a), BoolValue(b)):
            return _sign(int(a), int(b))
        case _:
            by_kind = _sign(type(left).__name__, type(right).__name__)
            return by_kind or _sign(as_text(left), as_text(right))


def compare_values(left: FieldValue, right: FieldValue, sort_field: SortField) -> int:
    """Compare two resolved values under one sort field; returns -1, 0 or 1."""
    left_absent, right_absent = left is ABSENT, right is ABSENT
    if left_absent and right_absent:
        return 0
    if left_absent:
        return -1 if sort_field.nulls_first else 1
    if right_absent:
        return 1 if sort_field.nulls_first else -1
    result = _compare_present(left, right, sort_field)
    return -result if sort_field.descending else result


class SortComparator:
    """Compare and sort records (or search results) by a :class:`SortRequest`."""

    def __init__(self, accessor: FieldAccessor | None = None) -> None:
        self._accessor = accessor or FieldAccessor()

    def validate(self, request: SortRequest | None) -> None:
        if request is None:
            return
        for sort_field in request.fields:
            if not isinstance(sort_field, SortField):
                raise InvalidSortError(f"expected SortField, got {type(sort_field).__name__}")
            path = sort_field.field
            if not path or any(not segment.strip() for segment in path.split(".")):
                raise InvalidSortError(f"malformed sort field path {path!r}", field=path)

    def compare(self, left: Any, right: Any, fields: Sequence[SortField]) -> int:
        for sort_field in fields:
            result = compare_values(
                self._resolve(left, sort_field.field),
                self._resolve(right, sort_field.field),
                sort_field,
            )
            if result:
                return result
        return 0

    def sort(self, records: Sequence[T], request: SortRequest | None) -> list[T]:
        """Stable sort of plain records."""
        return self._sorted(records, request, self._resolve)

    def sort_results(
        self,
        results: Sequence[SearchResult[T]],
        request: SortRequest | None,
    ) -> list[SearchResult[T]]:
        """Stable sort of search results by their records' fields (``_score`` for relevance)."""
        return self._sorted(results, request, self._resolve_result)

    def _sorted(
        self,
        items: Sequence[Any],
        request: SortRequest | None,
        resolve: Callable[[Any, str], FieldValue],
    ) -> list[Any]:
        self.validate(request)
        if not request:
            return list(items)

        fields = request.fields
        keyed = [([resolve(item, f.field) for f in fields], item) for item in items]

        def by_row(left: tuple[list[FieldValue], Any], right: tuple[list[FieldValue], Any]) -> int:
            for sort_field, a, b in zip(fields, left[0], right[0]):
                result = compare_values(a, b, sort_field)
                if result:
                    return result
            return 0

        keyed.sort(key=cmp_to_key(by_row))
        logger.debug(
            "listdata.sort.applied",
            fields=[f"{f.field}:{f.direction.value}" for f in fields],
            items=len(keyed),
        )
        return [item for _, item in keyed]

    def _resolve(self, record: Any, path: str) -> FieldValue:
        if path == SCORE_FIELD:
            return ABSENT
        return self._accessor.resolve(record, path)

    def _resolve_result(self, result: SearchResult[Any], path: str) -> FieldValue:
        if path == SCORE_FIELD:
            return NumberValue(result.score)
        return self._accessor.resolve(result.record, path)
