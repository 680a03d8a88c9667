"""Infrastructure errors — failures while fetching flag datasets.

Every error names the ``location`` (file path or endpoint URL) it was
reading, so a log line points straight at the broken flag source.
"""

from __future__ import annotations

from typing import Any

from yaft.kernel.errors.base import BaseError

_EXCERPT_LENGTH = 60


class InfrastructureError(BaseError):
    """A flag source could not deliver its dataset."""

    default_code = "flag_source_error"

    def __init__(self, message: str, *, location: str | None = None, **kwargs: Any) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        detail.setdefault("location", location)
        super().__init__(message, detail=detail, **kwargs)
        self.location = location


class TimeoutError(InfrastructureError):  # noqa: A001
    """A flag endpoint did not answer within the client timeout."""

    default_code = "flag_source_timeout"

    def __init__(self, location: str, *, timeout: float | None = None, **kwargs: Any) -> None:
        super().__init__(
            f"Flag endpoint {location} timed out",
            location=location,
            detail={"timeout": timeout},
            **kwargs,
        )
        self.timeout = timeout


class SerializationError(InfrastructureError):
    """A flag document (file contents or response body) is not valid JSON.

    ``excerpt`` keeps the start of the offending text for the log line.
    """

    default_code = "flag_document_invalid"

    def __init__(self, location: str, *, text: str | None = None, **kwargs: Any) -> None:
        excerpt = text[:_EXCERPT_LENGTH] if text else None
        super().__init__(
            f"Flag document at {location} is not valid JSON",
            location=location,
            detail={"excerpt": excerpt},
            **kwargs,
        )
        self.excerpt = excerpt


class ExternalServiceError(InfrastructureError):
    """The remote flag service answered with an error status or not at all."""

    default_code = "flag_service_error"

    def __init__(
        self,
        location: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        if status_code is not None:
            message = f"Flag service returned HTTP {status_code} for {location}"
        else:
            message = f"Flag service unreachable at {location}"
        super().__init__(
            message,
            location=location,
            detail={"status_code": status_code, "reason": reason},
            **kwargs,
        )
        self.status_code = status_code
        self.reason = reason


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
    "TimeoutError",
]
