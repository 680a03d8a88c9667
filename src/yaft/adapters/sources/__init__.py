"""Flag sources – adapters that deliver flag payloads into a FlagStore."""
from yaft.adapters.sources.api import ApiFlagSource
from yaft.adapters.sources.file import JsonFileFlagSource

__all__ = ["ApiFlagSource", "JsonFileFlagSource"]
