"""Kernel – framework-agnostic building blocks (errors, time)."""

from yaft.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigurationError,
    ExternalServiceError,
    InfrastructureError,
    ProviderNotConfiguredError,
    SerializationError,
    TimeoutError,
)
from yaft.kernel.time import Clock, FrozenClock, SystemClock, parse_instant, utc_now

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "ConfigurationError",
    "ExternalServiceError",
    "FrozenClock",
    "InfrastructureError",
    "ProviderNotConfiguredError",
    "SerializationError",
    "SystemClock",
    "TimeoutError",
    "parse_instant",
    "utc_now",
]
