"""Unit tests for RecordBuilder and the Hypothesis strategies."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from hypothesis import given

from mp_listdata.application.filtering import TypedFilter
from mp_listdata.application.sorting import SortField
from mp_listdata.testing import RecordBuilder
from mp_listdata.testing.strategies import (
    SORTABLE_FIELDS,
    records_strategy,
    sort_field_strategy,
    typed_filter_strategy,
)


@dataclass
class Row:
    id: str
    name: str = ""


# ---------------------------------------------------------------------------
# RecordBuilder
# ---------------------------------------------------------------------------


class TestRecordBuilder:
    def test_default_is_dict_with_id(self) -> None:
        assert RecordBuilder().build() == {"id": "rec-0"}

    def test_with_returns_new_builder(self) -> None:
        base = RecordBuilder(name="x")
        alice = base.with_(name="Alice")
        assert base.build()["name"] == "x"
        assert alice.build()["name"] == "Alice"

    def test_without_drops_field(self) -> None:
        assert "name" not in RecordBuilder(name="x").without("name").build()

    def test_call_applies_overrides(self) -> None:
        assert RecordBuilder()(id="a", n=1) == {"id": "a", "n": 1}

    def test_factory(self) -> None:
        assert RecordBuilder(Row).with_(name="Ann").build() == Row(id="rec-0", name="Ann")

    def test_many_assigns_ids(self) -> None:
        rows = RecordBuilder(Row).many(name=["a", "b"])
        assert rows == [Row("rec-0", "a"), Row("rec-1", "b")]

    def test_many_explicit_ids(self) -> None:
        assert [r["id"] for r in RecordBuilder().many(id=["x", "y"])] == ["x", "y"]

    def test_many_rejects_ragged_columns(self) -> None:
        with pytest.raises(ValueError):
            RecordBuilder().many(a=[1, 2], b=[1])

    def test_many_without_columns(self) -> None:
        assert RecordBuilder().many() == []

    def test_attrs_is_a_copy(self) -> None:
        builder = RecordBuilder(name="x")
        builder.attrs["name"] = "changed"
        assert builder.attrs["name"] == "x"


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


class TestStrategies:
    @given(records_strategy(max_size=10))
    def test_records_are_tagged_with_position(self, records: list) -> None:
        assert [r["id"] for r in records] == list(range(len(records)))
        assert all({"name", "price", "active", "created_at"} <= set(r) for r in records)

    @given(sort_field_strategy())
    def test_sort_fields(self, sort_field: SortField) -> None:
        assert sort_field.field in SORTABLE_FIELDS

    @given(typed_filter_strategy())
    def test_filters_target_generated_fields(self, typed: TypedFilter) -> None:
        assert typed.field in {"name", "price", "active"}
