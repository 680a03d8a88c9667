"""Application toggles – inert stand-ins for disabled classes.

The stub surface is, in order of preference:

* an explicit *capabilities* argument (names, or an interface class),
* a ``__toggle_capabilities__`` attribute declared on the original class,
* every callable defined along the original's MRO (``object`` excluded),
  skipping dunder names other than ``__call__``.

Async detection uses :func:`inspect.iscoroutinefunction` and
:func:`inspect.isasyncgenfunction` on the member found for each name.
Callables that return awaitables without being declared ``async def``
(decorated wrappers, ``functools.partial`` objects and similar) are treated
as synchronous and their stubs return ``None``, not an awaitable.
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from typing import Any

logger = logging.getLogger(__name__)

_BEHAVIOURAL_DUNDERS = frozenset({"__call__"})


def make_noop(template: Any) -> Callable[..., Any]:
    """Return a callable that accepts anything and does nothing.

    Mirrors the flavour of *template*: a coroutine function gets an
    ``async def`` whose awaited result is ``None``, and generator functions
    (sync or async) get a generator that yields nothing.
    """
    if inspect.isasyncgenfunction(template):
        async def noop(*args: Any, **kwargs: Any) -> AsyncIterator[Any]:  # noqa: ARG001
            return
            yield
    elif inspect.iscoroutinefunction(template):
        async def noop(*args: Any, **kwargs: Any) -> None:  # noqa: ARG001
            return None
    elif inspect.isgeneratorfunction(template):
        def noop(*args: Any, **kwargs: Any) -> Iterator[Any]:  # noqa: ARG001
            return
            yield
    else:
        def noop(*args: Any, **kwargs: Any) -> None:  # noqa: ARG001
            return None

    for attr in ("__name__", "__qualname__", "__doc__", "__module__"):
        value = getattr(template, attr, None)
        if value is not None:
            setattr(noop, attr, value)
    return noop


def _is_surface_name(name: str) -> bool:
    if name in _BEHAVIOURAL_DUNDERS:
        return True
    return not (name.startswith("__") and name.endswith("__"))


def _class_members(cls: type) -> dict[str, Any]:
    """Raw attributes along ``cls.__mro__``, nearest definition first."""
    members: dict[str, Any] = {}
    for klass in cls.__mro__:
        if klass is object or klass.__module__ in ("typing", "abc"):
            continue
        for name, attr in vars(klass).items():
            if name not in members and _is_surface_name(name):
                members[name] = attr
    return members


def _kind(attr: Any) -> str | None:
    if isinstance(attr, staticmethod):
        return "static"
    if isinstance(attr, classmethod):
        return "class"
    if isinstance(attr, (property, type)):
        return None
    if callable(attr):
        return "method"
    return None


def _callables(cls: type) -> dict[str, Any]:
    return {name: attr for name, attr in _class_members(cls).items() if _kind(attr) is not None}


def stub_surface(original: type, capabilities: type | Iterable[str] | None = None) -> dict[str, Any]:
    """Map each stubbed member name to the attribute used as its template."""
    declared = capabilities
    if declared is None:
        declared = getattr(original, "__toggle_capabilities__", None)

    own = _callables(original)
    if declared is None:
        return own

    if isinstance(declared, type):
        interface = _callables(declared)
        names: Iterable[str] = interface
    else:
        interface = {}
        names = [declared] if isinstance(declared, str) else declared

    surface: dict[str, Any] = {}
    for name in names:
        surface[name] = own.get(name, interface.get(name))
    return surface


def _inert_init(self: Any, *args: Any, **kwargs: Any) -> None:  # noqa: ARG001
    return None


def synthesize_stub(original: type, capabilities: type | Iterable[str] | None = None) -> type:
    """Build a constructible class with *original*'s method names and no behaviour.

    The constructor accepts and discards any arguments. Static and class
    methods keep their descriptor kind. The original class is recorded on the
    stub as ``__toggle_stub_of__``.
    """
    namespace: dict[str, Any] = {
        "__init__": _inert_init,
        "__doc__": original.__doc__,
        "__module__": original.__module__,
        "__qualname__": original.__qualname__,
        "__toggle_stub_of__": original,
    }
    surface = stub_surface(original, capabilities)
    for name, attr in surface.items():
        kind = _kind(attr) if attr is not None else "method"
        template = attr.__func__ if kind in ("static", "class") else attr
        noop = make_noop(template)
        noop.__name__ = name
        noop.__qualname__ = f"{original.__qualname__}.{name}"
        if kind == "static":
            namespace[name] = staticmethod(noop)
        elif kind == "class":
            namespace[name] = classmethod(noop)
        else:
            namespace[name] = noop

    stub = type(original.__name__, (), namespace)
    logger.debug(
        "feature_toggle.stub_synthesized class=%s members=%d",
        original.__qualname__,
        len(surface),
    )
    return stub


def is_stub(cls: Any) -> bool:
    return isinstance(cls, type) and "__toggle_stub_of__" in vars(cls)


__all__ = ["is_stub", "make_noop", "stub_surface", "synthesize_stub"]
