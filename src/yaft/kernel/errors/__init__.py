"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError            (application.py)
    │   └── ConfigurationError
    │       └── ProviderNotConfiguredError
    └── InfrastructureError         (infrastructure.py)
        ├── TimeoutError
        ├── SerializationError
        └── ExternalServiceError
"""

from yaft.kernel.errors.application import (
    ApplicationError,
    ConfigurationError,
    ProviderNotConfiguredError,
)
from yaft.kernel.errors.base import BaseError
from yaft.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "ExternalServiceError",
    "InfrastructureError",
    "ProviderNotConfiguredError",
    "SerializationError",
    "TimeoutError",
]
