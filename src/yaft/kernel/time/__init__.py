"""Kernel time – Clock port, implementations and timestamp parsing."""
from yaft.kernel.time.clock import Clock, FrozenClock, SystemClock, as_utc, parse_instant, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "as_utc", "parse_instant", "utc_now"]
