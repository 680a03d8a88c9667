"""Application toggles – in-memory RecordFlagStore and BooleanFlagStore."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from yaft.application.toggles.evaluation import evaluate_boolean, evaluate_record
from yaft.application.toggles.record import FlagRecord, normalize_booleans, normalize_records
from yaft.application.toggles.store import FlagDataSource, FlagPayload, FlagStore, load_payload
from yaft.kernel.time import Clock, SystemClock

logger = logging.getLogger(__name__)


class RecordFlagStore(FlagStore):
    """Time-windowed store backed by a ``{key: FlagRecord}`` snapshot.

    Every mutation builds a new read-only mapping and swaps the reference, so
    concurrent :meth:`is_enabled` calls see either the old or the new dataset.
    """

    def __init__(
        self,
        records: FlagDataSource | FlagPayload | None = None,
        *,
        clock: Clock | None = None,
        literal_values: bool = False,
    ) -> None:
        self._clock = clock or SystemClock()
        self._literal_values = literal_values
        self._records: Mapping[str, FlagRecord] = MappingProxyType(
            normalize_records(load_payload(records))
        )

    @property
    def records(self) -> Mapping[str, FlagRecord]:
        return self._records

    def get(self, key: str) -> FlagRecord | None:
        return self._records.get(key)

    def is_enabled(self, key: str) -> bool:
        return evaluate_record(
            self._records.get(key),
            self._clock.now(),
            literal_values=self._literal_values,
        )

    def refresh(self, source: FlagDataSource | FlagPayload) -> None:
        records = normalize_records(load_payload(source))
        self._records = MappingProxyType(records)
        logger.info("flag_store.refreshed kind=record count=%d", len(records))

    def put(self, record: FlagRecord) -> None:
        """Add or replace one record (copy-on-write)."""
        records = dict(self._records)
        records[record.key] = record
        self._records = MappingProxyType(records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)


class BooleanFlagStore(FlagStore):
    """Lightweight store backed by a ``{key: bool}`` snapshot; no time window."""

    def __init__(self, flags: FlagDataSource | FlagPayload | None = None) -> None:
        self._flags: Mapping[str, bool] = MappingProxyType(normalize_booleans(load_payload(flags)))

    @property
    def flags(self) -> Mapping[str, bool]:
        return self._flags

    def is_enabled(self, key: str) -> bool:
        return evaluate_boolean(self._flags.get(key))

    def refresh(self, source: FlagDataSource | FlagPayload) -> None:
        flags = normalize_booleans(load_payload(source))
        self._flags = MappingProxyType(flags)
        logger.info("flag_store.refreshed kind=boolean count=%d", len(flags))

    def set(self, key: str, enabled: bool) -> None:
        """Enable or disable one flag (copy-on-write)."""
        flags = dict(self._flags)
        flags[key] = enabled
        self._flags = MappingProxyType(flags)

    def __contains__(self, key: object) -> bool:
        return key in self._flags

    def __len__(self) -> int:
        return len(self._flags)


__all__ = ["BooleanFlagStore", "RecordFlagStore"]
