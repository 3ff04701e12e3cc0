"""Config – 12-factor settings for the flag registry."""

from mp_flags.config.settings import EnvSettingsLoader, FlagSettings, Settings, SettingsLoader
from mp_flags.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FlagSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
