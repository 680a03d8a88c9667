"""Application toggles – ToggleResolver.

Resolution happens once. The store is queried a single time when a
declaration is resolved, and the chosen implementation is returned as-is:
there is no per-call branch, so flipping a flag afterwards has no effect on
already-resolved classes and methods. Only new resolutions observe new flag
values.
"""
from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from yaft.application.toggles.store import FlagStore
from yaft.application.toggles.stub import make_noop, synthesize_stub

logger = logging.getLogger(__name__)

F = TypeVar("F")
C = TypeVar("C", bound=type)


def _delegate(original: Callable[..., Any], fallback: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap *fallback* so it can sit in *original*'s method slot.

    The wrapper is a plain function, so when installed on a class the instance
    is passed through as the first positional argument, exactly as it would
    have been for *original*. Whatever *fallback* returns (including an
    awaitable) is handed back untouched.
    """

    @functools.wraps(original)
    def effective(*args: Any, **kwargs: Any) -> Any:
        return fallback(*args, **kwargs)

    effective.__toggle_fallback__ = fallback  # type: ignore[attr-defined]
    return effective


def choose_method(enabled: bool, original: Any, fallback: Any = None) -> Any:
    """Pick the effective implementation for a function or method slot."""
    if isinstance(original, (staticmethod, classmethod)):
        if isinstance(fallback, (staticmethod, classmethod)):
            fallback = fallback.__func__
        return type(original)(choose_method(enabled, original.__func__, fallback))
    if enabled:
        return original
    if isinstance(fallback, (staticmethod, classmethod)):
        fallback = fallback.__func__
    if fallback is not None:
        return _delegate(original, fallback)
    return make_noop(original)


def choose_class(
    enabled: bool,
    original: C,
    fallback: type | None = None,
    *,
    capabilities: type | Iterable[str] | None = None,
) -> type:
    """Pick the effective class: original, fallback, or a synthesized stub."""
    if enabled:
        return original
    if fallback is not None:
        return fallback
    return synthesize_stub(original, capabilities)


class ToggleResolver:
    """Resolve declarations against an explicitly supplied :class:`FlagStore`.

    Usage::

        resolver = ToggleResolver(store)
        Checkout = resolver.resolve_class("new_checkout", NewCheckout, LegacyCheckout)
        make_client = resolver.resolve_factory("grpc_client", GrpcClient, RestClient)
    """

    def __init__(self, store: FlagStore) -> None:
        self._store = store

    @property
    def store(self) -> FlagStore:
        return self._store

    def query(self, key: str) -> bool:
        """Ask the store once. Store failures propagate to the caller."""
        enabled = bool(self._store.is_enabled(key))
        logger.debug("feature_toggle.queried key=%s enabled=%s", key, enabled)
        return enabled

    def resolve_method(self, key: str, original: F, fallback: Any = None) -> F:
        enabled = self.query(key)
        chosen = choose_method(enabled, original, fallback)
        logger.debug(
            "feature_toggle.resolved key=%s enabled=%s target=%s",
            key,
            enabled,
            getattr(original, "__qualname__", original),
        )
        return chosen

    def resolve_class(
        self,
        key: str,
        original: C,
        fallback: type | None = None,
        *,
        capabilities: type | Iterable[str] | None = None,
    ) -> type:
        enabled = self.query(key)
        chosen = choose_class(enabled, original, fallback, capabilities=capabilities)
        logger.debug(
            "feature_toggle.resolved key=%s enabled=%s target=%s",
            key,
            enabled,
            original.__qualname__,
        )
        return chosen

    def resolve_factory(
        self,
        key: str,
        factory: Callable[..., Any],
        fallback_factory: Callable[..., Any] | None = None,
        *,
        capabilities: type | Iterable[str] | None = None,
    ) -> Callable[..., Any]:
        """Return the factory application code should call.

        With the flag off and no *fallback_factory*, a class *factory* is
        replaced by its stub and any other callable by a no-op.
        """
        enabled = self.query(key)
        if enabled:
            return factory
        if fallback_factory is not None:
            return fallback_factory
        if isinstance(factory, type):
            return synthesize_stub(factory, capabilities)
        return make_noop(factory)


__all__ = ["ToggleResolver", "choose_class", "choose_method"]
