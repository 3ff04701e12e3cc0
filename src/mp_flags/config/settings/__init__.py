"""Config settings – env-based configuration."""
from mp_flags.config.settings.base import Settings
from mp_flags.config.settings.flags import FlagSettings
from mp_flags.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "FlagSettings", "Settings", "SettingsLoader"]
