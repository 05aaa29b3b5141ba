"""Application pagination – PaginationRequest with offset or cursor method."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class OffsetPagination:
    """1-based page number."""
    page: int = 1


@dataclasses.dataclass(frozen=True)
class CursorPagination:
    """Opaque resume token; empty means "from the start"."""
    token: str = ""


@dataclasses.dataclass(frozen=True)
class PaginationRequest:
    """Page size (``limit``) plus one pagination method.

    Out-of-range values are not rejected here: the paginator clamps them.
    A request without a method is treated as offset page 1.
    """
    limit: int = 0
    method: OffsetPagination | CursorPagination | None = None

    @classmethod
    def offset(cls, page: int = 1, size: int = 0) -> PaginationRequest:
        return cls(limit=size, method=OffsetPagination(page=page))

    @classmethod
    def cursor(cls, token: str = "", limit: int = 0) -> PaginationRequest:
        return cls(limit=limit, method=CursorPagination(token=token))

    @property
    def is_cursor(self) -> bool:
        return isinstance(self.method, CursorPagination)


__all__ = ["CursorPagination", "OffsetPagination", "PaginationRequest"]
