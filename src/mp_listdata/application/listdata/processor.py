"""Application listdata – ListDataProcessor.

Runs the fixed pipeline **filter → search → sort → paginate** over an
in-memory snapshot of records. Structural problems in the request are
detected before any stage runs, so a call either returns a complete result
or raises a :class:`~mp_listdata.kernel.errors.ListDataError`.

Without sort fields the search order (score descending, ties in input
order) is kept; sort fields override it, and ``_score`` can be used among
them to mix relevance with record fields.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from mp_listdata.application.filtering import FilterEvaluator, FilterRequest
from mp_listdata.application.listdata.result import ProcessedResult
from mp_listdata.application.pagination import (
    Cursor,
    CursorPagination,
    PaginationConfig,
    PaginationRequest,
    Paginator,
)
from mp_listdata.application.search import SearchConfig, SearchEngine, SearchRequest
from mp_listdata.application.sorting import SortComparator, SortRequest
from mp_listdata.config.settings import EnvSettingsLoader, ListDataSettings
from mp_listdata.kernel.errors import InvalidInputError, ListDataError
from mp_listdata.kernel.reflection import FieldAccessor
from mp_listdata.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["ListDataProcessor"]

logger = get_logger(__name__)


class ListDataProcessor(Generic[T]):
    """Filter, search, sort and paginate a sequence of records.

    Holds only immutable configuration; every :meth:`process` call works on
    its own lists, so one instance can serve concurrent callers.

    Args:
        settings: Engine tunables; defaults to :class:`ListDataSettings()`.
        accessor: Field accessor shared by every stage (e.g. one built with
            an extractor table).
        search_config: Overrides the search configuration derived from
            *settings* (alternate vocabularies, fuzzy matcher).
        pagination_config: Overrides the paging limits derived from *settings*.
    """

    def __init__(
        self,
        settings: ListDataSettings | None = None,
        *,
        accessor: FieldAccessor | None = None,
        search_config: SearchConfig | None = None,
        pagination_config: PaginationConfig | None = None,
    ) -> None:
        settings = settings or ListDataSettings()
        accessor = accessor or FieldAccessor()
        self._filters = FilterEvaluator(accessor)
        self._search: SearchEngine[T] = SearchEngine(search_config or SearchConfig.from_settings(settings), accessor)
        self._sorter = SortComparator(accessor)
        self._paginator = Paginator(pagination_config or PaginationConfig.from_settings(settings))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ListDataProcessor[Any]:
        """Build a processor from ``LISTDATA_*`` environment variables."""
        return cls(EnvSettingsLoader(environ).load(ListDataSettings))

    @property
    def filter_evaluator(self) -> FilterEvaluator:
        return self._filters

    @property
    def search_engine(self) -> SearchEngine[T]:
        return self._search

    @property
    def sort_comparator(self) -> SortComparator:
        return self._sorter

    @property
    def paginator(self) -> Paginator:
        return self._paginator

    def process(
        self,
        records: Sequence[T],
        pagination: PaginationRequest | None = None,
        filters: FilterRequest | None = None,
        sort: SortRequest | None = None,
        search: SearchRequest | None = None,
    ) -> ProcessedResult[T]:
        items = self._validate(records, pagination, filters, sort)

        filtered = self._filters.apply(items, filters)
        results, metrics = self._search.search(filtered, search)
        ordered = self._sorter.sort_results(results, sort)
        page, page_meta = self._paginator.paginate(ordered, pagination)

        logger.debug(
            "listdata.processed",
            received=len(items),
            filtered=len(filtered),
            matched=len(results),
            returned=len(page),
            total_pages=page_meta.total_pages,
        )
        return ProcessedResult(
            items=[result.record for result in page],
            pagination=page_meta,
            search_results=page,
            search_metrics=metrics,
        )

    def _validate(
        self,
        records: Sequence[T],
        pagination: PaginationRequest | None,
        filters: FilterRequest | None,
        sort: SortRequest | None,
    ) -> list[T]:
        try:
            if records is None:
                raise InvalidInputError("records are required", received_type="NoneType")
            if isinstance(records, str | bytes | bytearray | Mapping) or not isinstance(records, Sequence):
                raise InvalidInputError(
                    f"records must be a sequence, got {type(records).__name__}",
                    received_type=type(records).__name__,
                )
            self._filters.validate(filters)
            self._sorter.validate(sort)
            if pagination is not None and isinstance(pagination.method, CursorPagination):
                Cursor.decode(pagination.method.token)
        except ListDataError as exc:
            logger.warning("listdata.request.rejected", **exc.log_fields())
            raise
        return list(records)
