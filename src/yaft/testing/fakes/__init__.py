"""Testing fakes – in-memory doubles for toggle ports."""
from yaft.testing.fakes.flag_store import FakeFlagStore

__all__ = ["FakeFlagStore"]
