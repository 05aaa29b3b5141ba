"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ListDataError            (listdata.py)
    │   ├── InvalidInputError
    │   ├── InvalidFilterError
    │   ├── InvalidSortError
    │   └── InvalidCursorError
    └── ConfigError              (mp_listdata.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from mp_listdata.kernel.errors.base import BaseError
from mp_listdata.kernel.errors.listdata import (
    InvalidCursorError,
    InvalidFilterError,
    InvalidInputError,
    InvalidSortError,
    ListDataError,
)

__all__ = [
    "BaseError",
    "InvalidCursorError",
    "InvalidFilterError",
    "InvalidInputError",
    "InvalidSortError",
    "ListDataError",
]
