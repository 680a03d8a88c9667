"""Application toggles – process-wide flag store registration.

Exactly one store is active at a time. Decorators read whichever store is
registered at the moment they are applied; replacing the store later does not
affect declarations that were already resolved.
"""
from __future__ import annotations

from yaft.application.toggles.store import FlagStore
from yaft.kernel.errors import ProviderNotConfiguredError

_active_store: FlagStore | None = None


def set_flag_store(store: FlagStore) -> None:
    global _active_store
    _active_store = store


def get_flag_store(flag_key: str | None = None) -> FlagStore:
    """Return the registered store or raise :class:`ProviderNotConfiguredError`."""
    store = _active_store
    if store is None:
        raise ProviderNotConfiguredError(flag_key=flag_key)
    return store


def clear_flag_store() -> None:
    """Unregister the active store (useful between test cases)."""
    global _active_store
    _active_store = None


__all__ = ["clear_flag_store", "get_flag_store", "set_flag_store"]
