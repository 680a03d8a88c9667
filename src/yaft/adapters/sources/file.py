"""Flag sources – JsonFileFlagSource."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from yaft.application.toggles.record import check_kind, normalize_payload
from yaft.application.toggles.store import FlagDataSource
from yaft.kernel.errors import InfrastructureError, SerializationError

logger = logging.getLogger(__name__)


class JsonFileFlagSource(FlagDataSource):
    """Read a flag payload from a local JSON file.

    The document is either an object keyed by flag key or a list of feature
    objects; :meth:`load` returns it normalised for a *kind* store
    (``{key: FlagRecord}`` or ``{key: bool}``). A missing or corrupt file is
    logged and yields an empty payload, leaving every flag off; pass
    ``strict=True`` to raise instead.
    """

    def __init__(
        self,
        path: str | Path,
        kind: str = "record",
        *,
        strict: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        self._path = Path(path)
        self._kind = check_kind(kind)
        self._strict = strict
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    @property
    def kind(self) -> str:
        return self._kind

    def load(self) -> dict[str, Any]:
        try:
            text = self._path.read_text(encoding=self._encoding)
        except OSError as exc:
            if self._strict:
                raise InfrastructureError("Cannot read flag file", location=str(self._path)) from exc
            logger.warning("flag_source.file_unreadable path=%s exc=%r", self._path, exc)
            return {}
        try:
            payload = json.loads(text)
        except ValueError as exc:
            if self._strict:
                raise SerializationError(str(self._path), text=text) from exc
            logger.warning("flag_source.file_corrupt path=%s exc=%r", self._path, exc)
            return {}
        if not isinstance(payload, (dict, list)):
            logger.warning(
                "flag_source.file_unexpected_shape path=%s type=%s", self._path, type(payload).__name__
            )
            return {}
        return normalize_payload(payload, self._kind)


__all__ = ["JsonFileFlagSource"]
