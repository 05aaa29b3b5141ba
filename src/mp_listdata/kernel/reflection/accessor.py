"""Reflective field access over heterogeneous records.

A record can be a mapping, a dataclass, a plain or ``__slots__`` object, or
anything implementing :class:`FieldGetter`. Paths are dot-separated
snake_case; each segment is tried as written, then camelCase, then
PascalCase, then against any public name equal to it ignoring case and
underscores (so ``url_title`` finds ``URLTitle``). Resolution never raises
for data reasons: missing, private or ``None`` segments resolve to
:data:`~mp_listdata.kernel.types.ABSENT`.
"""
from __future__ import annotations

import dataclasses
import enum
import inspect
import types
import typing
from collections.abc import Callable, Iterable, Mapping
from datetime import date
from decimal import Decimal
from typing import Any, Final, Protocol, runtime_checkable

from mp_listdata.kernel.reflection.naming import fold_name, name_variants, to_snake_case
from mp_listdata.kernel.types import ABSENT, FieldValue, to_field_value

Extractor = Callable[[Any], Any]

_MISSING: Final = object()
_SCALARS: Final = (str, bytes, int, float, Decimal, date, enum.Enum)
_TEXT_ANNOTATIONS: Final = frozenset({
    "str",
    "str|None",
    "None|str",
    "Optional[str]",
    "typing.Optional[str]",
    "Union[str,None]",
    "typing.Union[str,None]",
})


@runtime_checkable
class FieldGetter(Protocol):
    """Capability a record implements to answer path lookups itself.

    ``get_field`` receives the remaining dot path and returns
    ``(value, found)``.
    """

    def get_field(self, path: str) -> tuple[Any, bool]: ...


@dataclasses.dataclass(frozen=True, slots=True)
class FieldInfo:
    """Top-level public field of a record."""

    name: str
    value: Any
    declared_text: bool = False


def is_text_annotation(annotation: Any) -> bool:
    """True for ``str`` and ``Optional[str]`` annotations (objects or strings)."""
    if annotation is str:
        return True
    if isinstance(annotation, str):
        return annotation.replace(" ", "") in _TEXT_ANNOTATIONS
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return members == [str]
    return False


class FieldAccessor:
    """Resolve dot paths against records.

    Args:
        extractors: Optional static table ``{record_type: {path: fn}}``. A
            registered extractor answers its exact path for instances of
            that type (or a subclass) before reflective lookup is tried.
    """

    def __init__(self, extractors: Mapping[type, Mapping[str, Extractor]] | None = None) -> None:
        self._extractors: dict[type, dict[str, Extractor]] = {
            record_type: dict(table) for record_type, table in (extractors or {}).items()
        }

    def resolve(self, record: Any, path: str) -> FieldValue:
        if record is None or not path:
            return ABSENT

        extractor = self._extractor_for(type(record), path)
        if extractor is not None:
            return to_field_value(extractor(record))

        segments = path.split(".")
        current = record
        for index, segment in enumerate(segments):
            if current is None:
                return ABSENT
            if isinstance(current, FieldGetter):
                value, found = current.get_field(".".join(segments[index:]))
                return to_field_value(value) if found else ABSENT
            if isinstance(current, _SCALARS):
                return ABSENT
            current = _lookup(current, segment)
            if current is _MISSING:
                return ABSENT
        return to_field_value(current)

    def field_names(self, record: Any) -> list[FieldInfo]:
        """List the record's top-level public fields, names in snake_case."""
        if record is None or isinstance(record, _SCALARS):
            return []
        if isinstance(record, Mapping):
            return [
                FieldInfo(to_snake_case(key), value)
                for key, value in record.items()
                if isinstance(key, str) and key and not key.startswith("_")
            ]
        if dataclasses.is_dataclass(record) and not isinstance(record, type):
            return [
                FieldInfo(to_snake_case(f.name), getattr(record, f.name, None), is_text_annotation(f.type))
                for f in dataclasses.fields(record)
                if not f.name.startswith("_")
            ]
        annotations = _class_annotations(type(record))
        return [
            FieldInfo(to_snake_case(name), value, is_text_annotation(annotations.get(name)))
            for name, value in _public_attributes(record)
        ]

    def _extractor_for(self, record_type: type, path: str) -> Extractor | None:
        if not self._extractors:
            return None
        for klass in record_type.__mro__:
            table = self._extractors.get(klass)
            if table is not None and path in table:
                return table[path]
        return None


def _lookup(obj: Any, segment: str) -> Any:
    if not segment or segment.startswith("_"):
        return _MISSING
    candidates = name_variants(segment)
    if isinstance(obj, Mapping):
        for name in candidates:
            if name in obj:
                return obj[name]
        native = _loose_match(segment, (key for key in obj if isinstance(key, str)))
        return obj[native] if native is not None else _MISSING
    for name in candidates:
        value = _attribute(obj, name)
        if value is not _MISSING:
            return value
    native = _loose_match(segment, dir(obj))
    return _attribute(obj, native) if native is not None else _MISSING


def _attribute(obj: Any, name: str) -> Any:
    value = getattr(obj, name, _MISSING)
    if value is _MISSING or inspect.isroutine(value):
        return _MISSING
    return value


def _loose_match(segment: str, names: Iterable[str]) -> str | None:
    """Native name equal to *segment* ignoring case and underscores (``URLTitle`` for ``url_title``)."""
    wanted = fold_name(segment)
    for name in names:
        if name and not name.startswith("_") and fold_name(name) == wanted:
            return name
    return None


def _class_annotations(klass: type) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for base in reversed(klass.__mro__):
        merged.update(getattr(base, "__annotations__", {}))
    return merged


def _public_attributes(record: Any) -> list[tuple[str, Any]]:
    attributes: dict[str, Any] = {}
    for base in type(record).__mro__:
        slots = getattr(base, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if not slot.startswith("_") and hasattr(record, slot):
                attributes.setdefault(slot, getattr(record, slot))
    if hasattr(record, "__dict__"):
        for name, value in vars(record).items():
            if not name.startswith("_"):
                attributes.setdefault(name, value)
    return list(attributes.items())


__all__ = ["Extractor", "FieldAccessor", "FieldGetter", "FieldInfo", "is_text_annotation"]
