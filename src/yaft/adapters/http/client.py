"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from yaft.kernel.errors import ExternalServiceError, SerializationError, TimeoutError as FetchTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper that maps transport failures onto flag-source errors."""

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._timeout = timeout
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.get(url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(url, timeout=self._timeout) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(url, status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(url, reason=str(exc) or type(exc).__name__) from exc

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        """GET *url* and decode the body as JSON."""
        response = await self.get(url, **kwargs)
        try:
            return response.json()
        except ValueError as exc:
            raise SerializationError(url, text=response.text) from exc


__all__ = ["HttpxHttpClient"]
