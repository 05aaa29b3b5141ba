"""Application filtering – FilterEvaluator.

Absent-field policy: a filter on a field that resolves to ``ABSENT`` is
false for positive operators and true for the negative ones
(``NOT_EQUALS``, ``NOT_IN``). A present value of an incompatible type makes
the filter false whatever the operator.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from typing import Any

from mp_listdata.application.filtering.filters import (
    BooleanFilter,
    DateFilter,
    DateOperator,
    FilterLogic,
    FilterRequest,
    ListFilter,
    ListOperator,
    NumberFilter,
    NumberOperator,
    RangeFilter,
    StringFilter,
    StringOperator,
    TypedFilter,
)
from mp_listdata.kernel.errors import InvalidFilterError
from mp_listdata.kernel.reflection import FieldAccessor
from mp_listdata.kernel.types import (
    ABSENT,
    FieldValue,
    ObjectValue,
    StringValue,
    as_bool,
    as_number,
    as_text,
    as_timestamp,
    parse_timestamp,
    to_field_value,
    to_float,
)
from mp_listdata.observability.logging import get_logger

__all__ = ["FilterEvaluator"]

_CONDITION_TYPES = (StringFilter, NumberFilter, BooleanFilter, ListFilter, RangeFilter, DateFilter)

logger = get_logger(__name__)


class FilterEvaluator:
    """Evaluate a :class:`FilterRequest` against records."""

    def __init__(self, accessor: FieldAccessor | None = None) -> None:
        self._accessor = accessor or FieldAccessor()

    def validate(self, request: FilterRequest | None) -> None:
        """Raise :class:`InvalidFilterError` for structurally broken filters."""
        if request is None:
            return
        for typed in request.filters:
            if not isinstance(typed, TypedFilter):
                raise InvalidFilterError(f"expected TypedFilter, got {type(typed).__name__}")
            if not typed.field or any(not segment.strip() for segment in typed.field.split(".")):
                raise InvalidFilterError(f"malformed filter field path {typed.field!r}", field=typed.field)
            condition = typed.condition
            if not isinstance(condition, _CONDITION_TYPES):
                raise InvalidFilterError(
                    f"unsupported filter type {type(condition).__name__}", field=typed.field
                )
            if isinstance(condition, ListFilter) and isinstance(condition.values, str | bytes):
                raise InvalidFilterError("list filter values must be a sequence of values", field=typed.field)
            if (
                isinstance(condition, RangeFilter)
                and condition.min is not None
                and condition.max is not None
                and condition.min > condition.max
            ):
                raise InvalidFilterError(
                    f"range lower bound {condition.min} exceeds upper bound {condition.max}",
                    field=typed.field,
                )

    def keep(self, record: Any, request: FilterRequest | None) -> bool:
        if not request:
            return True
        outcomes = (self.evaluate(record, typed) for typed in request.filters)
        if request.logic is FilterLogic.OR:
            return any(outcomes)
        return all(outcomes)

    def apply(self, records: Sequence[Any], request: FilterRequest | None) -> list[Any]:
        self.validate(request)
        if not request:
            return list(records)
        kept = [record for record in records if self.keep(record, request)]
        logger.debug(
            "listdata.filter.applied",
            filters=len(request.filters),
            logic=request.logic.value,
            kept=len(kept),
            dropped=len(records) - len(kept),
        )
        return kept

    def evaluate(self, record: Any, typed: TypedFilter) -> bool:
        value = self._accessor.resolve(record, typed.field)
        match typed.condition:
            case StringFilter() as condition:
                return _string(value, condition)
            case NumberFilter() as condition:
                return _number(value, condition)
            case BooleanFilter() as condition:
                return _boolean(value, condition)
            case ListFilter() as condition:
                return _listed(value, condition)
            case RangeFilter() as condition:
                return _ranged(value, condition)
            case DateFilter() as condition:
                return _dated(value, condition)
            case other:
                raise InvalidFilterError(f"unsupported filter type {type(other).__name__}", field=typed.field)


def _string(value: FieldValue, condition: StringFilter) -> bool:
    if value is ABSENT:
        return condition.operator is StringOperator.NOT_EQUALS
    if not isinstance(value, StringValue):
        return False

    text, operand = value.value, condition.value
    if condition.operator is StringOperator.REGEX:
        try:
            pattern = re.compile(operand, 0 if condition.case_sensitive else re.IGNORECASE)
        except re.error:
            return False
        return pattern.search(text) is not None

    if not condition.case_sensitive:
        text, operand = text.lower(), operand.lower()
    match condition.operator:
        case StringOperator.EQUALS:
            return text == operand
        case StringOperator.NOT_EQUALS:
            return text != operand
        case StringOperator.CONTAINS:
            return operand in text
        case StringOperator.STARTS_WITH:
            return text.startswith(operand)
        case StringOperator.ENDS_WITH:
            return text.endswith(operand)
        case _:
            return False


def _number(value: FieldValue, condition: NumberFilter) -> bool:
    if value is ABSENT:
        return condition.operator is NumberOperator.NOT_EQUALS
    number = as_number(value)
    if number is None:
        return False

    operand = to_float(condition.value)
    match condition.operator:
        case NumberOperator.EQUALS:
            return number == operand
        case NumberOperator.NOT_EQUALS:
            return number != operand
        case NumberOperator.GREATER_THAN:
            return number > operand
        case NumberOperator.GREATER_THAN_OR_EQUAL:
            return number >= operand
        case NumberOperator.LESS_THAN:
            return number < operand
        case NumberOperator.LESS_THAN_OR_EQUAL:
            return number <= operand
        case _:
            return False


def _boolean(value: FieldValue, condition: BooleanFilter) -> bool:
    flag = as_bool(value)
    return flag is not None and flag == condition.value


def _listed(value: FieldValue, condition: ListFilter) -> bool:
    if value is ABSENT:
        return condition.operator is ListOperator.NOT_IN
    if isinstance(value, ObjectValue):
        return False

    text = as_text(value)
    contained = any(text == as_text(to_field_value(candidate)) for candidate in condition.values)
    match condition.operator:
        case ListOperator.IN:
            return contained
        case ListOperator.NOT_IN:
            return not contained
        case _:
            return False


def _ranged(value: FieldValue, condition: RangeFilter) -> bool:
    number = as_number(value)
    if number is None:
        return False

    if condition.min is not None:
        lower = to_float(condition.min)
        if number < lower or (number == lower and not condition.include_min):
            return False
    if condition.max is not None:
        upper = to_float(condition.max)
        if number > upper or (number == upper and not condition.include_max):
            return False
    return True


def _operand_timestamp(operand: datetime | date | str | None) -> datetime | None:
    if operand is None:
        return None
    if isinstance(operand, str):
        return parse_timestamp(operand)
    if isinstance(operand, datetime):
        return operand if operand.tzinfo is not None else operand.replace(tzinfo=UTC)
    return datetime.combine(operand, time.min, tzinfo=UTC)


def _dated(value: FieldValue, condition: DateFilter) -> bool:
    instant = as_timestamp(value)
    operand = _operand_timestamp(condition.value)
    if instant is None or operand is None:
        return False

    match condition.operator:
        case DateOperator.EQUALS:
            return instant.astimezone(UTC).date() == operand.astimezone(UTC).date()
        case DateOperator.BEFORE:
            return instant < operand
        case DateOperator.AFTER:
            return instant > operand
        case DateOperator.BETWEEN:
            end = _operand_timestamp(condition.range_end)
            return end is not None and operand <= instant <= end
        case _:
            return False
