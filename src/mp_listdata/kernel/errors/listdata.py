"""List-data errors — structurally invalid input handed to the engine.

Data-level oddities (missing fields, type mismatches, out-of-range page
numbers) are absorbed by the engine and never show up here.
"""

from __future__ import annotations

from typing import Any

from mp_listdata.kernel.errors.base import BaseError


class ListDataError(BaseError):
    """Technical failure of the list-data pipeline."""

    default_code = "listdata_error"


class InvalidInputError(ListDataError):
    """The record collection is missing or is not a sequence."""

    default_code = "invalid_input"

    def __init__(
        self,
        message: str = "records must be a sequence",
        *,
        received_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.received_type = received_type
        if received_type is not None:
            self.detail.setdefault("received_type", received_type)


class InvalidFilterError(ListDataError):
    """A filter cannot be evaluated (empty field path, unknown type, bad bounds)."""

    default_code = "invalid_filter"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


class InvalidSortError(ListDataError):
    """A sort field cannot be applied."""

    default_code = "invalid_sort"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


class InvalidCursorError(ListDataError):
    """A pagination cursor token could not be decoded."""

    default_code = "invalid_cursor"

    def __init__(self, token: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or "cursor token is malformed", **kwargs)
        self.token = token


__all__ = [
    "InvalidCursorError",
    "InvalidFilterError",
    "InvalidInputError",
    "InvalidSortError",
    "ListDataError",
]
