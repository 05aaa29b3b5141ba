"""Application sorting – multi-field stable ordering."""
from mp_listdata.application.sorting.comparator import SCORE_FIELD, SortComparator, compare_values
from mp_listdata.application.sorting.sort_field import NullOrder, SortDirection, SortField, SortRequest

__all__ = [
    "SCORE_FIELD",
    "NullOrder",
    "SortComparator",
    "SortDirection",
    "SortField",
    "SortRequest",
    "compare_values",
]
