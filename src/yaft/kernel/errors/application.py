"""Application-layer errors — misuse of the toggle API by the host program."""

from __future__ import annotations

from typing import Any

from yaft.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Error raised by the host application's use of the library."""

    default_code = "application_error"


class ConfigurationError(ApplicationError):
    """The process is wired up incorrectly; fatal at startup."""

    default_code = "configuration_error"


class ProviderNotConfiguredError(ConfigurationError):
    """A toggle was declared before any flag store was registered."""

    default_code = "toggle_provider_not_set"

    def __init__(
        self,
        message: str = "toggle provider not set",
        *,
        flag_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if flag_key is not None:
            detail.setdefault("flag_key", flag_key)
        super().__init__(message, detail=detail, **kwargs)
        self.flag_key = flag_key


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ProviderNotConfiguredError",
]
