"""Config settings – env-based configuration for flag stores."""
from yaft.config.settings.base import Settings
from yaft.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from yaft.config.settings.toggles import ToggleSettings, build_flag_store

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "ToggleSettings",
    "build_flag_store",
]
