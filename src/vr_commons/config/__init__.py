"""Configuration – settings dataclasses, loaders and validation errors."""
from vr_commons.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RevisionSettings,
    Settings,
    SettingsLoader,
)
from vr_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RevisionSettings",
    "Settings",
    "SettingsLoader",
]
