"""Application pagination – offset/cursor requests, paginator and response metadata."""
from mp_listdata.application.pagination.cursor import Cursor
from mp_listdata.application.pagination.page import PaginationResponse
from mp_listdata.application.pagination.page_request import (
    CursorPagination,
    OffsetPagination,
    PaginationRequest,
)
from mp_listdata.application.pagination.paginator import PaginationConfig, Paginator

__all__ = [
    "Cursor",
    "CursorPagination",
    "OffsetPagination",
    "PaginationConfig",
    "PaginationRequest",
    "PaginationResponse",
    "Paginator",
]
