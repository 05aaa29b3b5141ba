"""Kernel types – the FieldValue tagged union and its coercions."""
from mp_listdata.kernel.types.field_value import (
    ABSENT,
    Absent,
    BoolValue,
    FieldValue,
    NumberValue,
    ObjectValue,
    StringValue,
    TimestampValue,
    as_bool,
    as_number,
    as_text,
    as_timestamp,
    is_absent,
    parse_timestamp,
    to_field_value,
    to_float,
)

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
