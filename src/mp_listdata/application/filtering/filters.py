"""Application filtering – typed filter request objects."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias
from datetime import date, datetime
from enum import Enum

__all__ = [
    "BooleanFilter",
    "DateFilter",
    "DateOperator",
    "FilterCondition",
    "FilterLogic",
    "FilterRequest",
    "ListFilter",
    "ListOperator",
    "NumberFilter",
    "NumberOperator",
    "RangeFilter",
    "StringFilter",
    "StringOperator",
    "TypedFilter",
]


class StringOperator(str, Enum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    CONTAINS = "CONTAINS"
    STARTS_WITH = "STARTS_WITH"
    ENDS_WITH = "ENDS_WITH"
    REGEX = "REGEX"


class NumberOperator(str, Enum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"


class ListOperator(str, Enum):
    IN = "IN"
    NOT_IN = "NOT_IN"


class DateOperator(str, Enum):
    EQUALS = "EQUALS"
    BEFORE = "BEFORE"
    AFTER = "AFTER"
    BETWEEN = "BETWEEN"


class FilterLogic(str, Enum):
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class StringFilter:
    operator: StringOperator
    value: str
    case_sensitive: bool = True


@dataclass(frozen=True)
class NumberFilter:
    operator: NumberOperator
    value: float


@dataclass(frozen=True)
class BooleanFilter:
    value: bool


@dataclass(frozen=True)
class ListFilter:
    operator: ListOperator
    values: tuple[str, ...]


@dataclass(frozen=True)
class RangeFilter:
    """Numeric range; ``None`` leaves a side open."""
    min: float | None = None
    max: float | None = None
    include_min: bool = True
    include_max: bool = True


@dataclass(frozen=True)
class DateFilter:
    """Date comparison; operands are datetimes, dates or ISO-8601 strings.

    ``EQUALS`` compares calendar days (UTC); ``BETWEEN`` is inclusive and
    needs ``range_end``.
    """
    operator: DateOperator
    value: datetime | date | str
    range_end: datetime | date | str | None = None


FilterCondition: TypeAlias = StringFilter | NumberFilter | BooleanFilter | ListFilter | RangeFilter | DateFilter


@dataclass(frozen=True)
class TypedFilter:
    """One predicate over one field path."""
    field: str
    condition: FilterCondition


@dataclass(frozen=True)
class FilterRequest:
    filters: tuple[TypedFilter, ...] = ()
    logic: FilterLogic = FilterLogic.AND

    @classmethod
    def all_of(cls, *filters: TypedFilter) -> FilterRequest:
        return cls(filters=filters, logic=FilterLogic.AND)

    @classmethod
    def any_of(cls, *filters: TypedFilter) -> FilterRequest:
        return cls(filters=filters, logic=FilterLogic.OR)

    def __bool__(self) -> bool:
        return bool(self.filters)
