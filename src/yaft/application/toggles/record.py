"""Application toggles – FlagRecord value object and payload normalisation."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from yaft.kernel.errors import ConfigurationError

FLAG_KINDS = ("record", "boolean")


@dataclasses.dataclass(frozen=True)
class FlagRecord:
    """Stored state of one time-windowed feature flag.

    ``raw_value`` is kept as text exactly as the data source delivered it;
    ``active_at`` / ``disabled_at`` are ISO-8601 text or ``""``. Neither is
    interpreted here — see :func:`~yaft.application.toggles.evaluation.evaluate_record`.
    """

    key: str
    raw_value: str = "false"
    active_at: str = ""
    disabled_at: str = ""
    tags: tuple[str, ...] = ()


def _pick(entry: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        value = entry.get(name)
        if value is not None:
            return value
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_tags(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, (list, tuple)):
        return tuple(str(tag) for tag in value)
    return ()


def record_from_mapping(entry: Mapping[str, Any], *, key: str | None = None) -> FlagRecord | None:
    """Build a :class:`FlagRecord` from one feature object.

    Both camelCase (``activeAt``) and capitalised (``ActiveAt``) field names are
    accepted, as well as snake_case. *key* is used when the entry carries none.
    Returns ``None`` when no key can be found.
    """
    record_key = _pick(entry, "key", "Key") or key
    if not record_key:
        return None
    tags = _as_tags(_pick(entry, "tags", "Tags"))
    return FlagRecord(
        key=str(record_key),
        raw_value=_as_text(_pick(entry, "value", "Value", "raw_value")),
        active_at=_as_text(_pick(entry, "activeAt", "ActiveAt", "active_at")),
        disabled_at=_as_text(_pick(entry, "disabledAt", "DisabledAt", "disabled_at")),
        tags=tags,
    )


def _entries(payload: Mapping[str, Any] | Iterable[Any] | None) -> Iterable[tuple[str | None, Any]]:
    if payload is None:
        return ()
    if isinstance(payload, Mapping):
        return payload.items()
    return ((None, entry) for entry in payload)


def normalize_records(
    payload: Mapping[str, Any] | Iterable[Any] | None,
) -> dict[str, FlagRecord]:
    """Turn a keyed object or a list of feature objects into ``{key: FlagRecord}``.

    Entries that are neither mappings nor :class:`FlagRecord` instances, and
    list entries without a key, are dropped. Later duplicates win.
    """
    records: dict[str, FlagRecord] = {}
    for key, entry in _entries(payload):
        if isinstance(entry, FlagRecord):
            record: FlagRecord | None = entry
        elif isinstance(entry, Mapping):
            record = record_from_mapping(entry, key=key)
        else:
            record = None
        if record is None:
            continue
        records[key if key is not None else record.key] = record
    return records


def _as_flag(value: Any) -> bool:
    return value is True or value == "true"


def normalize_booleans(
    payload: Mapping[str, Any] | Iterable[Any] | None,
) -> dict[str, bool]:
    """Turn a keyed object or a list of ``{key, value}`` objects into ``{key: bool}``.

    Only ``True`` and the text ``"true"`` count as enabled.
    """
    flags: dict[str, bool] = {}
    for key, entry in _entries(payload):
        if key is not None:
            if isinstance(entry, Mapping):
                entry = _pick(entry, "value", "Value")
            flags[key] = _as_flag(entry)
            continue
        if not isinstance(entry, Mapping):
            continue
        entry_key = _pick(entry, "key", "Key")
        if entry_key:
            flags[str(entry_key)] = _as_flag(_pick(entry, "value", "Value"))
    return flags


def check_kind(kind: str) -> str:
    if kind not in FLAG_KINDS:
        raise ConfigurationError(f"Unknown flag kind {kind!r}", detail={"expected": list(FLAG_KINDS)})
    return kind


def normalize_payload(
    payload: Mapping[str, Any] | Iterable[Any] | None,
    kind: str = "record",
) -> dict[str, Any]:
    """Normalise *payload* for a store of the given *kind* (see :data:`FLAG_KINDS`)."""
    if check_kind(kind) == "record":
        return normalize_records(payload)
    return normalize_booleans(payload)


__all__ = [
    "FLAG_KINDS",
    "FlagRecord",
    "check_kind",
    "normalize_booleans",
    "normalize_payload",
    "normalize_records",
    "record_from_mapping",
]
