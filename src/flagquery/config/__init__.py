"""Config – env settings, loaders, and validation errors."""

from flagquery.config.settings import EnvSettingsLoader, FlagQuerySettings, Settings, SettingsLoader
from flagquery.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


def load_settings() -> FlagQuerySettings:
    """Read :class:`FlagQuerySettings` from the process environment."""
    return EnvSettingsLoader().load(FlagQuerySettings)


__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FlagQuerySettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
