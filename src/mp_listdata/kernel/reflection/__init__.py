"""Kernel reflection – dot-path field access over arbitrary records."""
from mp_listdata.kernel.reflection.accessor import (
    Extractor,
    FieldAccessor,
    FieldGetter,
    FieldInfo,
    is_text_annotation,
)
from mp_listdata.kernel.reflection.naming import (
    fold_name,
    name_variants,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)

__all__ = [
    "Extractor",
    "FieldAccessor",
    "FieldGetter",
    "FieldInfo",
    "fold_name",
    "is_text_annotation",
    "name_variants",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
]
