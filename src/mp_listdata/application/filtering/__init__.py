"""Application filtering – typed predicates evaluated against records."""
from mp_listdata.application.filtering.evaluator import FilterEvaluator
from mp_listdata.application.filtering.filters import (
    BooleanFilter,
    DateFilter,
    DateOperator,
    FilterCondition,
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

__all__ = [
    "BooleanFilter",
    "DateFilter",
    "DateOperator",
    "FilterCondition",
    "FilterEvaluator",
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
