"""Config settings – 12-factor env-based configuration."""
from mp_listdata.config.settings.base import Settings
from mp_listdata.config.settings.listdata import (
    DEFAULT_STOP_WORDS,
    DEFAULT_TEXT_FIELD_HINTS,
    ListDataSettings,
)
from mp_listdata.config.settings.loaders import EnvSettingsLoader, SettingsLoader, coerce

__all__ = [
    "DEFAULT_STOP_WORDS",
    "DEFAULT_TEXT_FIELD_HINTS",
    "EnvSettingsLoader",
    "ListDataSettings",
    "Settings",
    "SettingsLoader",
    "coerce",
]
