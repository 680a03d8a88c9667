"""Application toggles – FlagStore and FlagDataSource ports."""
from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping
from typing import Any

FlagPayload = Mapping[str, Any] | Iterable[Any]


class FlagDataSource(abc.ABC):
    """Port: produce a raw flag payload (keyed object or list of features)."""

    @abc.abstractmethod
    def load(self) -> FlagPayload: ...


class FlagStore(abc.ABC):
    """Port: answer "is this flag on?" over the current dataset.

    ``is_enabled`` must be synchronous, side-effect free and total: an unknown
    key is ``False`` and no input makes it raise. ``refresh`` replaces the
    whole dataset at once; readers never observe a half-applied refresh.
    """

    @abc.abstractmethod
    def is_enabled(self, key: str) -> bool: ...

    @abc.abstractmethod
    def refresh(self, source: FlagDataSource | FlagPayload) -> None: ...


def load_payload(source: FlagDataSource | FlagPayload | None) -> FlagPayload:
    """Return the payload behind *source*, calling ``load()`` on data sources."""
    if source is None:
        return {}
    if isinstance(source, FlagDataSource):
        return source.load()
    return source


__all__ = ["FlagDataSource", "FlagPayload", "FlagStore", "load_payload"]
