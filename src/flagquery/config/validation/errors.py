"""Config validation – errors raised while reading ``FLAGQUERY_*`` settings."""
from flagquery.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded into a settings dataclass."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable {setting_name} is required but not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used, e.g. ``FLAGQUERY_JSON_LOGS=maybe``."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for {setting_name}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
