"""Config validation errors, raised while loading or validating settings."""
from mp_listdata.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded or are inconsistent."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no environment value."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"no value for required setting {setting_name}", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unparseable or out of its allowed range."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
