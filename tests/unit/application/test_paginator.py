"""Unit tests for offset and cursor pagination."""

from __future__ import annotations

import base64

import pytest

from mp_listdata.application.pagination import (
    Cursor,
    PaginationConfig,
    PaginationRequest,
    PaginationResponse,
    Paginator,
)
from mp_listdata.config.settings import ListDataSettings
from mp_listdata.kernel.errors import InvalidCursorError

ITEMS = list(range(1, 26))


# ---------------------------------------------------------------------------
# PaginationResponse
# ---------------------------------------------------------------------------


class TestPaginationResponse:
    @pytest.mark.parametrize(
        ("total", "size", "pages"),
        [(25, 10, 3), (20, 10, 2), (0, 10, 0), (1, 10, 1), (5, 0, 0)],
    )
    def test_total_pages(self, total: int, size: int, pages: int) -> None:
        assert PaginationResponse(total_items=total, page_size=size).total_pages == pages


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------


class TestCursor:
    def test_encode_is_urlsafe_json(self) -> None:
        token = Cursor(20).encode()
        padded = token + "=" * (-len(token) % 4)
        assert base64.urlsafe_b64decode(padded) == b'{"offset":20}'
        assert "=" not in token

    def test_decode_round_trip(self) -> None:
        assert Cursor.decode(Cursor(7).encode()) == Cursor(7)

    def test_empty_token_is_start(self) -> None:
        assert Cursor.decode("") == Cursor(0)

    def test_negative_offset_clamps(self) -> None:
        token = base64.urlsafe_b64encode(b'{"offset":-4}').decode()
        assert Cursor.decode(token) == Cursor(0)

    @pytest.mark.parametrize(
        "token",
        [
            "!!!",
            "not base64 at all",
            base64.urlsafe_b64encode(b"[1,2]").decode(),
            base64.urlsafe_b64encode(b'{"offset":"3"}').decode(),
            base64.urlsafe_b64encode(b'{"offset":true}').decode(),
            "é",
        ],
    )
    def test_malformed_tokens_raise(self, token: str) -> None:
        with pytest.raises(InvalidCursorError) as exc_info:
            Cursor.decode(token)
        assert exc_info.value.token == token


# ---------------------------------------------------------------------------
# Offset pagination
# ---------------------------------------------------------------------------


class TestOffsetPagination:
    def setup_method(self) -> None:
        self.paginator = Paginator()

    def test_middle_page(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, PaginationRequest.offset(page=2, size=10))
        assert page == list(range(11, 21))
        assert meta.current_page == 2
        assert meta.total_items == 25
        assert meta.total_pages == 3
        assert meta.has_next and meta.has_prev
        assert meta.next_cursor is None

    def test_last_partial_page(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, PaginationRequest.offset(page=3, size=10))
        assert page == [21, 22, 23, 24, 25]
        assert not meta.has_next
        assert meta.has_prev

    def test_page_below_one_clamps(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, PaginationRequest.offset(page=0, size=10))
        assert page == list(range(1, 11))
        assert meta.current_page == 1
        assert not meta.has_prev

    def test_page_beyond_end_is_empty(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, PaginationRequest.offset(page=9, size=10))
        assert page == []
        assert not meta.has_next
        assert meta.has_prev

    @pytest.mark.parametrize("size", [0, -3, 101])
    def test_out_of_range_size_uses_default(self, size: int) -> None:
        paginator = Paginator(PaginationConfig(default_page_size=4, max_page_size=100))
        page, meta = paginator.paginate(ITEMS, PaginationRequest.offset(page=1, size=size))
        assert page == [1, 2, 3, 4]
        assert meta.page_size == 4

    def test_missing_method_is_page_one(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, PaginationRequest(limit=5))
        assert page == [1, 2, 3, 4, 5]
        assert meta.current_page == 1

    def test_no_request_returns_everything(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, None)
        assert page == ITEMS
        assert meta.page_size == 25
        assert meta.total_pages == 1
        assert not meta.has_next

    def test_no_request_on_empty_items(self) -> None:
        page, meta = self.paginator.paginate([], None)
        assert page == []
        assert meta.total_pages == 0
        assert meta.current_page is None
        assert not meta.has_next and not meta.has_prev

    def test_empty_items(self) -> None:
        meta = self.paginator.empty_response(PaginationRequest.offset(page=1, size=10))
        assert meta.total_items == 0
        assert meta.total_pages == 0
        assert not meta.has_next and not meta.has_prev
        assert meta.current_page == 1

    def test_config_from_settings(self) -> None:
        config = PaginationConfig.from_settings(ListDataSettings(default_page_size=20, max_page_size=50))
        assert config == PaginationConfig(default_page_size=20, max_page_size=50)


# ---------------------------------------------------------------------------
# Cursor pagination
# ---------------------------------------------------------------------------


class TestCursorPagination:
    def setup_method(self) -> None:
        self.paginator = Paginator()

    def test_walks_every_item_once(self) -> None:
        seen: list[int] = []
        token = ""
        for _ in range(10):
            page, meta = self.paginator.paginate(ITEMS, PaginationRequest.cursor(token, limit=10))
            seen.extend(page)
            assert meta.current_page is None
            if meta.next_cursor is None:
                assert not meta.has_next
                break
            token = meta.next_cursor
        assert seen == ITEMS

    def test_first_page_has_no_prev(self) -> None:
        _, meta = self.paginator.paginate(ITEMS, PaginationRequest.cursor("", limit=10))
        assert not meta.has_prev
        assert meta.next_cursor == Cursor(10).encode()

    def test_resumes_from_offset(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, PaginationRequest.cursor(Cursor(20).encode(), limit=10))
        assert page == [21, 22, 23, 24, 25]
        assert meta.has_prev
        assert meta.next_cursor is None

    def test_offset_past_end(self) -> None:
        page, meta = self.paginator.paginate(ITEMS, PaginationRequest.cursor(Cursor(99).encode(), limit=10))
        assert page == []
        assert not meta.has_next

    def test_bad_token_raises(self) -> None:
        with pytest.raises(InvalidCursorError):
            self.paginator.paginate(ITEMS, PaginationRequest.cursor("%%%", limit=10))
