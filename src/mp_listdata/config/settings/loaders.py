"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_listdata.config.settings.base import Settings
from mp_listdata.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_COLLECTIONS: dict[str, type] = {"list": list, "tuple": tuple, "frozenset": frozenset}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` instance from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``Settings`` fields from environment variables.

    Variable names come from :meth:`Settings.env_key`. Unset variables keep
    the field default; a field without a default must be set.

    Args:
        environ: Mapping to read from; defaults to :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = settings_class.env_key(field.name)
            if key not in environ:
                if _is_required(field):
                    raise MissingRequiredSettingError(key)
                continue
            raw = environ[key]
            try:
                values[field.name] = coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"cannot build {settings_class.__name__}: {exc}", cause=exc) from exc


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


def _hint_name(type_hint: Any) -> str:
    if isinstance(type_hint, str):
        return type_hint.replace(" ", "")
    origin = getattr(type_hint, "__origin__", None)
    if origin is not None:
        return f"{origin.__name__}[...]"
    return getattr(type_hint, "__name__", "")


def coerce(value: str, type_hint: Any) -> Any:
    """Convert one raw environment string to the field's declared type.

    Handles ``bool``, ``int``, ``float`` and comma-separated ``list`` /
    ``tuple`` / ``frozenset`` of strings; anything else stays a string.
    Annotations may be objects or (postponed) strings.
    """
    hint = _hint_name(type_hint)
    if hint == "bool":
        return value.strip().lower() in _TRUE_WORDS
    if hint == "int":
        return int(value)
    if hint == "float":
        return float(value)
    collection = _COLLECTIONS.get(hint.partition("[")[0])
    if collection is not None:
        return collection(item.strip() for item in value.split(",") if item.strip())
    return value


__all__ = ["EnvSettingsLoader", "SettingsLoader", "coerce"]
