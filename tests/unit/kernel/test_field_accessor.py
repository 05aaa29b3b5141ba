"""Unit tests for FieldAccessor and naming helpers."""

from __future__ import annotations

import dataclasses
from typing import Any, Optional

import pytest

from mp_listdata.kernel.reflection import (
    FieldAccessor,
    FieldGetter,
    is_text_annotation,
    name_variants,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from mp_listdata.kernel.types import ABSENT, NumberValue, ObjectValue, StringValue


@dataclasses.dataclass
class Address:
    city: str


@dataclasses.dataclass
class Client:
    name: str
    address: Address | None = None
    nickname: Optional[str] = None
    visits: int = 0
    _secret: str = "hidden"

    def greeting(self) -> str:
        return f"hi {self.name}"


@dataclasses.dataclass
class AcronymRecord:
    userID: str


class CamelRecord:
    def __init__(self) -> None:
        self.firstName = "Ada"
        self.LastName = "Lovelace"


class SlottedRecord:
    __slots__ = ("code", "_internal")

    def __init__(self, code: str) -> None:
        self.code = code
        self._internal = 1


class SingleSlot:
    __slots__ = "label"

    def __init__(self, label: str) -> None:
        self.label = label


class SelfDescribing:
    """Answers every lookup itself."""

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    def get_field(self, path: str) -> tuple[Any, bool]:
        if path in self._data:
            return self._data[path], True
        return None, False


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestNaming:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("firstName", "first_name"), ("FirstName", "first_name"), ("HTTPStatus", "http_status"), ("plain", "plain")],
    )
    def test_to_snake_case(self, name: str, expected: str) -> None:
        assert to_snake_case(name) == expected

    def test_camel_and_pascal(self) -> None:
        assert to_camel_case("date_modified") == "dateModified"
        assert to_pascal_case("date_modified") == "DateModified"

    def test_variants_are_unique(self) -> None:
        assert name_variants("name") == ["name", "Name"]
        assert name_variants("first_name") == ["first_name", "firstName", "FirstName"]


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def setup_method(self) -> None:
        self.accessor = FieldAccessor()

    def test_dataclass_field(self) -> None:
        assert self.accessor.resolve(Client(name="Ann"), "name") == StringValue("Ann")

    def test_nested_path(self) -> None:
        client = Client(name="Ann", address=Address(city="Lisbon"))
        assert self.accessor.resolve(client, "address.city") == StringValue("Lisbon")

    def test_none_intermediate_is_absent(self) -> None:
        assert self.accessor.resolve(Client(name="Ann"), "address.city") is ABSENT

    def test_missing_field_is_absent(self) -> None:
        assert self.accessor.resolve(Client(name="Ann"), "unknown") is ABSENT

    def test_private_and_methods_are_hidden(self) -> None:
        client = Client(name="Ann")
        assert self.accessor.resolve(client, "_secret") is ABSENT
        assert self.accessor.resolve(client, "greeting") is ABSENT

    def test_camel_and_pascal_variants(self) -> None:
        record = CamelRecord()
        assert self.accessor.resolve(record, "first_name") == StringValue("Ada")
        assert self.accessor.resolve(record, "last_name") == StringValue("Lovelace")

    def test_acronym_cased_names(self) -> None:
        assert self.accessor.resolve({"URLTitle": "home"}, "url_title") == StringValue("home")
        assert self.accessor.resolve(AcronymRecord(userID="u1"), "user_id") == StringValue("u1")

    def test_every_listed_field_resolves(self) -> None:
        for record in ({"URLTitle": "a", "HTTPStatus": 200}, AcronymRecord(userID="u1")):
            for info in self.accessor.field_names(record):
                assert self.accessor.resolve(record, info.name) is not ABSENT

    def test_mapping_records(self) -> None:
        record = {"clientName": "Ann", "meta": {"score": 4}}
        assert self.accessor.resolve(record, "client_name") == StringValue("Ann")
        assert self.accessor.resolve(record, "meta.score") == NumberValue(4)

    def test_scalar_intermediate_is_absent(self) -> None:
        assert self.accessor.resolve({"name": "Ann"}, "name.length") is ABSENT

    def test_objects_resolve_as_object_value(self) -> None:
        value = self.accessor.resolve({"tags": ["a"]}, "tags")
        assert value == ObjectValue(["a"])

    def test_none_record_and_empty_path(self) -> None:
        assert self.accessor.resolve(None, "name") is ABSENT
        assert self.accessor.resolve({"name": "x"}, "") is ABSENT

    def test_field_getter_receives_remaining_path(self) -> None:
        record = {"inner": SelfDescribing({"a.b": 7})}
        assert isinstance(record["inner"], FieldGetter)
        assert self.accessor.resolve(record, "inner.a.b") == NumberValue(7)
        assert self.accessor.resolve(record, "inner.missing") is ABSENT

    def test_extractor_wins_over_reflection(self) -> None:
        accessor = FieldAccessor(extractors={Client: {"name": lambda c: c.name.upper()}})
        assert accessor.resolve(Client(name="Ann"), "name") == StringValue("ANN")

    def test_extractor_applies_to_subclasses(self) -> None:
        @dataclasses.dataclass
        class VipClient(Client):
            pass

        accessor = FieldAccessor(extractors={Client: {"tier": lambda c: "gold"}})
        assert accessor.resolve(VipClient(name="Ann"), "tier") == StringValue("gold")
        assert accessor.resolve(VipClient(name="Ann"), "name") == StringValue("Ann")


# ---------------------------------------------------------------------------
# field_names
# ---------------------------------------------------------------------------


class TestFieldNames:
    def setup_method(self) -> None:
        self.accessor = FieldAccessor()

    def test_dataclass_marks_declared_text(self) -> None:
        infos = {info.name: info for info in self.accessor.field_names(Client(name="Ann"))}
        assert set(infos) == {"name", "address", "nickname", "visits"}
        assert infos["name"].declared_text
        assert infos["nickname"].declared_text
        assert not infos["visits"].declared_text

    def test_mapping_keys_snake_cased(self) -> None:
        names = [info.name for info in self.accessor.field_names({"firstName": "A", "_x": 1})]
        assert names == ["first_name"]

    def test_plain_object(self) -> None:
        names = sorted(info.name for info in self.accessor.field_names(CamelRecord()))
        assert names == ["first_name", "last_name"]

    def test_slots(self) -> None:
        assert [info.name for info in self.accessor.field_names(SlottedRecord("c1"))] == ["code"]
        assert [info.name for info in self.accessor.field_names(SingleSlot("x"))] == ["label"]

    def test_scalars_have_no_fields(self) -> None:
        assert self.accessor.field_names("text") == []
        assert self.accessor.field_names(None) == []


class TestIsTextAnnotation:
    @pytest.mark.parametrize("annotation", [str, Optional[str], str | None, "str", "str | None", "Optional[str]"])
    def test_text(self, annotation: Any) -> None:
        assert is_text_annotation(annotation)

    @pytest.mark.parametrize("annotation", [int, "int", str | int, None])
    def test_not_text(self, annotation: Any) -> None:
        assert not is_text_annotation(annotation)
