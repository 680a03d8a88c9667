"""Config – settings, loaders and validation errors."""

from yaft.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    ToggleSettings,
    build_flag_store,
)
from yaft.config.validation import InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "ToggleSettings",
    "build_flag_store",
]
