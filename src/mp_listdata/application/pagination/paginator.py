"""Application pagination – Paginator (offset and cursor slicing).

Parameter errors are clamped, never raised: a page below 1 becomes 1 and a
size outside ``1..max_page_size`` becomes ``default_page_size``. Only an
undecodable cursor token raises
:class:`~mp_listdata.kernel.errors.InvalidCursorError`.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import TypeVar

from mp_listdata.application.pagination.cursor import Cursor
from mp_listdata.application.pagination.page import PaginationResponse
from mp_listdata.application.pagination.page_request import CursorPagination, PaginationRequest
from mp_listdata.config.settings import ListDataSettings
from mp_listdata.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["PaginationConfig", "Paginator"]

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class PaginationConfig:
    default_page_size: int = 100
    max_page_size: int = 100

    @classmethod
    def from_settings(cls, settings: ListDataSettings) -> PaginationConfig:
        return cls(default_page_size=settings.default_page_size, max_page_size=settings.max_page_size)


class Paginator:
    def __init__(self, config: PaginationConfig | None = None) -> None:
        self._config = config or PaginationConfig()

    @property
    def config(self) -> PaginationConfig:
        return self._config

    def page_size(self, request: PaginationRequest | None) -> int:
        """Effective page size for *request* after clamping."""
        if request is None or not 1 <= request.limit <= self._config.max_page_size:
            return self._config.default_page_size
        return request.limit

    def paginate(
        self,
        items: Sequence[T],
        request: PaginationRequest | None,
    ) -> tuple[list[T], PaginationResponse]:
        total = len(items)
        if request is None:
            return list(items), PaginationResponse(
                total_items=total, page_size=total, current_page=1 if total else None
            )

        size = self.page_size(request)
        if isinstance(request.method, CursorPagination):
            page, response = self._by_cursor(items, request.method, size)
        else:
            page_number = request.method.page if request.method is not None else 1
            page, response = self._by_offset(items, page_number, size)

        logger.debug(
            "listdata.page.built",
            mode="cursor" if request.is_cursor else "offset",
            total=total,
            size=size,
            returned=len(page),
            has_next=response.has_next,
        )
        return page, response

    def empty_response(self, request: PaginationRequest | None) -> PaginationResponse:
        """Well-formed metadata for an empty result set."""
        _, response = self.paginate([], request)
        return response

    def _by_offset(self, items: Sequence[T], page_number: int, size: int) -> tuple[list[T], PaginationResponse]:
        total = len(items)
        page_number = max(1, page_number)
        start = (page_number - 1) * size
        page = list(items[start:start + size])
        response = PaginationResponse(
            total_items=total,
            page_size=size,
            current_page=page_number,
            has_prev=page_number > 1 and total > 0,
        )
        return page, dataclasses.replace(response, has_next=page_number < response.total_pages)

    def _by_cursor(self, items: Sequence[T], method: CursorPagination, size: int) -> tuple[list[T], PaginationResponse]:
        total = len(items)
        offset = Cursor.decode(method.token).offset
        page = list(items[offset:offset + size])
        end = offset + len(page)
        has_next = end < total
        response = PaginationResponse(
            total_items=total,
            page_size=size,
            has_next=has_next,
            has_prev=offset > 0 and total > 0,
            next_cursor=Cursor(end).encode() if has_next else None,
        )
        return page, response
