"""Config settings – 12-factor env-based configuration."""
from vr_commons.config.settings.base import Settings
from vr_commons.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from vr_commons.config.settings.revision import RevisionSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "RevisionSettings", "Settings", "SettingsLoader"]
