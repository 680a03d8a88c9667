"""Application toggles – @feature_toggle declaration decorator."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from yaft.application.toggles.registry import get_flag_store
from yaft.application.toggles.resolver import ToggleResolver, choose_class, choose_method
from yaft.application.toggles.store import FlagStore

logger = logging.getLogger(__name__)


def feature_toggle(
    key: str,
    fallback: Any = None,
    *,
    store: FlagStore | None = None,
    capabilities: type | Iterable[str] | None = None,
) -> Callable[[Any], Any]:
    """Gate a class, function or method behind the flag *key*.

    The flag is read when ``feature_toggle(...)`` is evaluated, which for
    decorator syntax is while the class or function is being defined. If no
    *store* is passed and none is registered via
    :func:`~yaft.application.toggles.registry.set_flag_store`,
    :class:`~yaft.kernel.errors.ProviderNotConfiguredError` is raised and the
    definition is aborted.

    When the flag is off:

    * a class is replaced by *fallback*, or by an inert stub exposing the same
      method names when no fallback is given;
    * a function or method is replaced by a wrapper calling *fallback* with the
      original arguments (including ``self``), or by a no-op returning
      ``None`` (awaitable for ``async def`` originals).

    Usage::

        @feature_toggle("new_pricing", LegacyPricing)
        class Pricing:
            ...

        class Cart:
            @feature_toggle("express_checkout", legacy_checkout)
            def checkout(self, order):
                ...
    """
    resolver = ToggleResolver(store if store is not None else get_flag_store(key))
    enabled = resolver.query(key)

    def decorator(target: Any) -> Any:
        if isinstance(target, type):
            chosen = choose_class(enabled, target, fallback, capabilities=capabilities)
        elif callable(target) or isinstance(target, (staticmethod, classmethod)):
            chosen = choose_method(enabled, target, fallback)
        else:
            raise TypeError(
                f"@feature_toggle({key!r}) cannot decorate {type(target).__name__} objects"
            )
        logger.debug(
            "feature_toggle.resolved key=%s enabled=%s target=%s",
            key,
            enabled,
            getattr(target, "__qualname__", type(target).__name__),
        )
        return chosen

    return decorator


__all__ = ["feature_toggle"]
