"""Config validation – error types raised while loading settings."""
from yaft.config.validation.errors import InvalidSettingValueError, MissingRequiredSettingError

__all__ = ["InvalidSettingValueError", "MissingRequiredSettingError"]
