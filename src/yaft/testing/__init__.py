"""Testing support – fakes for code that declares feature toggles."""

from yaft.testing.fakes import FakeFlagStore

__all__ = ["FakeFlagStore"]
