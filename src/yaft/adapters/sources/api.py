"""Flag sources – ApiFlagSource.

Talks to a flag service exposing two endpoints per flag collection::

    GET {api_url}/collectionHash/{base_uuid}  -> {"collectionHash": "..."}
    GET {api_url}/features/{base_uuid}        -> {"toggles": [{...}, ...]}

Both ``value`` envelopes (``{"value": ...}``) and capitalised field names are
accepted. :meth:`ApiFlagSource.sync` only downloads the features when the
collection hash changed since the last successful sync.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from yaft.adapters.http.client import HttpxHttpClient
from yaft.application.toggles.record import check_kind, normalize_payload
from yaft.application.toggles.store import FlagDataSource, FlagPayload, FlagStore
from yaft.kernel.errors import InfrastructureError

logger = logging.getLogger(__name__)


def extract_features(body: Any) -> FlagPayload:
    if isinstance(body, Mapping):
        features = body.get("toggles") or body.get("value") or []
    else:
        features = body
    if isinstance(features, (Mapping, list)):
        return features
    return []


def extract_hash(body: Any) -> str:
    if isinstance(body, Mapping):
        value = body.get("collectionHash") or body.get("value") or ""
        return str(value)
    return "" if body is None else str(body)


class ApiFlagSource(FlagDataSource):
    """Remote flag source backed by :class:`HttpxHttpClient`.

    Features are normalised for a *kind* store, as with
    :class:`~yaft.adapters.sources.file.JsonFileFlagSource`. :meth:`load`
    returns the payload from the most recent successful :meth:`fetch`, so the
    source can also be handed to ``store.refresh``.
    """

    def __init__(
        self,
        api_url: str,
        base_uuid: str,
        *,
        kind: str = "record",
        client: HttpxHttpClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._base_uuid = base_uuid
        self._kind = check_kind(kind)
        self._client = client or HttpxHttpClient(timeout=timeout)
        self._collection_hash: str | None = None
        self._payload: dict[str, Any] = {}

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def hash_url(self) -> str:
        return f"{self._api_url}/collectionHash/{self._base_uuid}"

    @property
    def features_url(self) -> str:
        return f"{self._api_url}/features/{self._base_uuid}"

    @property
    def last_hash(self) -> str | None:
        return self._collection_hash

    async def collection_hash(self) -> str:
        return extract_hash(await self._client.get_json(self.hash_url))

    async def fetch(self) -> dict[str, Any]:
        body = await self._client.get_json(self.features_url)
        self._payload = normalize_payload(extract_features(body), self._kind)
        return self._payload

    def load(self) -> dict[str, Any]:
        return self._payload

    async def sync(self, store: FlagStore) -> bool:
        """Refresh *store* when the remote collection changed.

        Returns ``True`` when the store was refreshed. Transport failures are
        logged and leave the store's current dataset in place.
        """
        try:
            remote_hash = await self.collection_hash()
            if remote_hash == self._collection_hash:
                logger.debug("flag_source.unchanged url=%s hash=%s", self.hash_url, remote_hash)
                return False
            payload = await self.fetch()
        except InfrastructureError as exc:
            logger.warning("flag_source.sync_failed url=%s exc=%r", self._api_url, exc)
            return False
        store.refresh(payload)
        self._collection_hash = remote_hash
        logger.info("flag_source.synced url=%s hash=%s", self._api_url, remote_hash)
        return True

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["ApiFlagSource", "extract_features", "extract_hash"]
