"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings.

    Subclasses set ``_prefix``; field ``page_size`` of a ``LISTDATA``
    settings class is read from ``LISTDATA_PAGE_SIZE``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    def _validate(self) -> None:
        """Hook for range and cross-field checks; raise InvalidSettingValueError."""


__all__ = ["Settings"]
