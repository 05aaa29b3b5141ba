"""Application pagination – PaginationResponse metadata."""
from __future__ import annotations

import dataclasses
import math


@dataclasses.dataclass(frozen=True)
class PaginationResponse:
    """Navigation metadata for one page.

    ``current_page`` is set in offset mode only; ``next_cursor`` in cursor
    mode only, and only while more items remain.
    """

    total_items: int
    page_size: int
    has_next: bool = False
    has_prev: bool = False
    current_page: int | None = None
    next_cursor: str | None = None

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_items <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)


__all__ = ["PaginationResponse"]
