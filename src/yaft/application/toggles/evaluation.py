"""Application toggles – flag evaluation.

Both evaluators are pure and total: malformed timestamps, unparseable raw
values and unknown keys all evaluate to ``False`` instead of raising, so a bad
flag record can only ever switch a feature off.

Time-windowed evaluation checks, in order:

1. ``disabled_at`` parses and is ``<= now``  → ``False``
2. ``active_at`` parses and is ``> now``     → ``False``
3. otherwise the raw value decides.

A future ``active_at`` therefore yields ``False`` whatever the raw value is.
The effective window is ``[active_at, disabled_at)``.
"""
from __future__ import annotations

import json
from datetime import datetime

from yaft.application.toggles.record import FlagRecord
from yaft.kernel.time import as_utc, parse_instant


def parse_raw_value(raw: object, *, literal: bool = False) -> bool:
    """Interpret a stored raw value.

    By default only the exact text ``"true"`` is enabled. With ``literal=True``
    the text is decoded as JSON and a boolean literal is honoured; anything
    else, including a decode failure, is ``False``.
    """
    if not literal:
        return raw == "true"
    try:
        parsed = json.loads(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False
    return parsed if isinstance(parsed, bool) else False


def evaluate_record(
    record: FlagRecord | None,
    now: datetime,
    *,
    literal_values: bool = False,
) -> bool:
    """Return whether *record* is enabled at *now*. Absent records are off."""
    if record is None:
        return False
    now = as_utc(now)

    disabled_at = parse_instant(record.disabled_at)
    if disabled_at is not None and disabled_at <= now:
        return False

    active_at = parse_instant(record.active_at)
    if active_at is not None and active_at > now:
        return False

    return parse_raw_value(record.raw_value, literal=literal_values)


def evaluate_boolean(value: bool | None) -> bool:
    """Evaluate a plain boolean flag; ``None`` (unknown key) is off."""
    return value is True


__all__ = ["evaluate_boolean", "evaluate_record", "parse_raw_value"]
