"""Testing fakes – FakeFlagStore."""
from __future__ import annotations

from yaft.application.toggles.record import normalize_booleans
from yaft.application.toggles.store import FlagDataSource, FlagPayload, FlagStore, load_payload


class FakeFlagStore(FlagStore):
    """In-memory :class:`FlagStore` that records every query.

    Use :meth:`enable` / :meth:`disable` to configure flags before declaring
    toggles; inspect :attr:`queries` to assert how often the store was asked.

    Usage::

        store = FakeFlagStore().enable("new_checkout")
        set_flag_store(store)

        @feature_toggle("new_checkout")
        def checkout(): ...

        assert store.queries == ["new_checkout"]
    """

    def __init__(self, *, default: bool = False) -> None:
        self._enabled: dict[str, bool] = {}
        self._default = default
        self.queries: list[str] = []

    def is_enabled(self, key: str) -> bool:
        self.queries.append(key)
        return self._enabled.get(key, self._default)

    def refresh(self, source: FlagDataSource | FlagPayload) -> None:
        self._enabled = normalize_booleans(load_payload(source))

    def enable(self, key: str) -> "FakeFlagStore":
        self._enabled[key] = True
        return self

    def disable(self, key: str) -> "FakeFlagStore":
        self._enabled[key] = False
        return self

    def query_count(self, key: str) -> int:
        return self.queries.count(key)

    def reset(self) -> None:
        """Clear configured flags and the query log."""
        self._enabled.clear()
        self.queries.clear()


__all__ = ["FakeFlagStore"]
