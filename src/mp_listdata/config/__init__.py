"""Config – 12-factor settings and loaders."""

from mp_listdata.config.settings import EnvSettingsLoader, ListDataSettings, Settings, SettingsLoader
from mp_listdata.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ListDataSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
