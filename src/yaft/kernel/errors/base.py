"""Root of the yaft error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is a stable slug for filtering logs. ``detail`` holds the flag
    context the error was raised with (flag key, file path, endpoint URL,
    HTTP status); context entries whose value is ``None`` are dropped.
    """

    default_code: str = "yaft_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = {
            name: value for name, value in (detail or {}).items() if value is not None
        }
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        if not self.detail:
            return f"[{self.code}] {self.message}"
        context = " ".join(f"{name}={value}" for name, value in sorted(self.detail.items()))
        return f"[{self.code}] {self.message} ({context})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a log-friendly dict; detail keys sit beside code and message."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, **self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
