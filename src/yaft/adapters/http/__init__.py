"""HTTP adapter – async HTTP client used by remote flag sources."""
from yaft.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
