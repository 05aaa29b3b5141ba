"""Application sorting – SortField, SortDirection, NullOrder, SortRequest."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class NullOrder(str, Enum):
    NULLS_FIRST = "NULLS_FIRST"
    NULLS_LAST = "NULLS_LAST"


@dataclasses.dataclass(frozen=True)
class SortField:
    """Single sort criterion.

    ``case_sensitive`` applies to string values, ``absolute`` to numbers.
    Null placement follows ``null_order`` whatever the direction.
    """
    field: str
    direction: SortDirection = SortDirection.ASC
    null_order: NullOrder = NullOrder.NULLS_LAST
    case_sensitive: bool = False
    absolute: bool = False

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    @property
    def nulls_first(self) -> bool:
        return self.null_order is NullOrder.NULLS_FIRST


@dataclasses.dataclass(frozen=True)
class SortRequest:
    """Ordered sort criteria; later fields break ties of earlier ones."""
    fields: tuple[SortField, ...] = ()

    @classmethod
    def by(cls, *fields: SortField | str) -> SortRequest:
        return cls(tuple(f if isinstance(f, SortField) else SortField(f) for f in fields))

    def __bool__(self) -> bool:
        return bool(self.fields)


__all__ = ["NullOrder", "SortDirection", "SortField", "SortRequest"]
