"""FieldValue — tagged union of the values a record field can resolve to.

Variants: :class:`StringValue`, :class:`NumberValue`, :class:`BoolValue`,
:class:`TimestampValue`, :class:`ObjectValue` and the :data:`ABSENT`
singleton. Produced once by the field accessor and consumed by filtering,
sorting and search through ``match`` statements.

The ``as_*`` helpers coerce across variants and return ``None`` on a
mismatch; they never raise.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from decimal import Decimal
from typing import Any, Final, TypeAlias


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class NumberValue:
    """Integer, float or Decimal; compared in a single float domain."""

    value: int | float | Decimal

    def as_float(self) -> float:
        return to_float(self.value)


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class TimestampValue:
    """Timezone-aware instant (naive inputs are taken as UTC)."""

    value: datetime


@dataclass(frozen=True, slots=True)
class ObjectValue:
    """Anything else: nested records, lists, custom objects."""

    value: Any


class Absent:
    """Field is missing, unset or ``None``."""

    __slots__ = ()
    _instance: Absent | None = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent()

FieldValue: TypeAlias = StringValue | NumberValue | BoolValue | TimestampValue | ObjectValue | Absent

_TRUTHY_STRINGS: Final = frozenset({"true", "1", "yes"})


def to_float(number: int | float | Decimal) -> float:
    """``float(number)``, with integers beyond the float range mapped to ±inf."""
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_field_value(raw: Any) -> FieldValue:
    """Classify a raw Python value into a :data:`FieldValue` variant."""
    if raw is None:
        return ABSENT
    if isinstance(raw, Absent | StringValue | NumberValue | BoolValue | TimestampValue | ObjectValue):
        return raw
    if isinstance(raw, enum.Enum):
        return to_field_value(raw.value)
    if isinstance(raw, bool):
        return BoolValue(raw)
    if isinstance(raw, str):
        return StringValue(raw)
    if isinstance(raw, int | float | Decimal):
        if (isinstance(raw, float) and math.isnan(raw)) or (isinstance(raw, Decimal) and raw.is_nan()):
            return ABSENT
        return NumberValue(raw)
    if isinstance(raw, datetime):
        return TimestampValue(_aware(raw))
    if isinstance(raw, date):
        return TimestampValue(datetime.combine(raw, time.min, tzinfo=UTC))
    return ObjectValue(raw)


def is_absent(value: FieldValue) -> bool:
    return value is ABSENT


def as_text(value: FieldValue) -> str:
    """Textual rendering used by search and list filters (absent → ``""``)."""
    match value:
        case StringValue(text):
            return text
        case BoolValue(flag):
            return "true" if flag else "false"
        case NumberValue(number):
            if isinstance(number, float) and number.is_integer():
                return str(int(number))
            return str(number)
        case TimestampValue(instant):
            return instant.isoformat()
        case ObjectValue(obj):
            return str(obj)
        case _:
            return ""


def as_number(value: FieldValue) -> float | None:
    match value:
        case NumberValue():
            number = value.as_float()
            return None if math.isnan(number) else number
        case StringValue(text):
            try:
                number = float(text.strip())
            except ValueError:
                return None
            return None if math.isnan(number) else number
        case _:
            return None


def parse_timestamp(text: str) -> datetime | None:
    """Parse ISO-8601 / RFC3339 text (``Z`` suffix accepted)."""
    candidate = text.strip()
    if not candidate:
        return None
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        return _aware(datetime.fromisoformat(candidate))
    except ValueError:
        return None


def as_timestamp(value: FieldValue) -> datetime | None:
    """Timestamps as-is, numbers as Unix milliseconds, strings parsed as ISO-8601."""
    match value:
        case TimestampValue(instant):
            return instant
        case NumberValue():
            try:
                return datetime.fromtimestamp(value.as_float() / 1000.0, tz=UTC)
            except (OverflowError, OSError, ValueError):
                return None
        case StringValue(text):
            return parse_timestamp(text)
        case _:
            return None


def as_bool(value: FieldValue) -> bool | None:
    match value:
        case BoolValue(flag):
            return flag
        case StringValue(text):
            return text.strip().lower() in _TRUTHY_STRINGS
        case NumberValue(number) if isinstance(number, int):
            return number != 0
        case _:
            return None


__all__ = [
    "ABSENT",
    "Absent",
    "BoolValue",
    "FieldValue",
    "NumberValue",
    "ObjectValue",
    "StringValue",
    "TimestampValue",
    "as_bool",
    "as_number",
    "as_text",
    "as_timestamp",
    "is_absent",
    "parse_timestamp",
    "to_field_value",
    "to_float",
]
