"""Config settings – 12-factor env-based configuration."""
from flagquery.config.settings.base import FlagQuerySettings, Settings
from flagquery.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "FlagQuerySettings", "Settings", "SettingsLoader"]
