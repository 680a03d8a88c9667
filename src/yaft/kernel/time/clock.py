"""Kernel time – Clock protocol, implementations and ISO-8601 parsing."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of "now" for flag evaluation."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = as_utc(fixed)

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)

    def set(self, instant: datetime) -> None:
        self._fixed = as_utc(instant)


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


def as_utc(instant: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values are returned unchanged."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant


def parse_instant(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Returns ``None`` for ``None``, blank strings and anything
    :meth:`datetime.fromisoformat` rejects. Naive results are taken as UTC.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return as_utc(parsed)


__all__ = ["Clock", "FrozenClock", "SystemClock", "as_utc", "parse_instant", "utc_now"]
