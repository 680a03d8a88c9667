"""Unit tests for flag records and time-windowed evaluation."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from yaft.application.toggles import (
    FLAG_KINDS,
    FlagRecord,
    evaluate_boolean,
    evaluate_record,
    normalize_booleans,
    normalize_payload,
    normalize_records,
    parse_raw_value,
)
from yaft.kernel.errors import ConfigurationError

NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


def _iso(instant: datetime) -> str:
    return instant.isoformat()


def _record(
    raw_value: str = "true",
    active_at: str = "",
    disabled_at: str = "",
    key: str = "flag",
) -> FlagRecord:
    return FlagRecord(key=key, raw_value=raw_value, active_at=active_at, disabled_at=disabled_at)


# ---------------------------------------------------------------------------
# FlagRecord value object
# ---------------------------------------------------------------------------


class TestFlagRecord:
    def test_frozen(self) -> None:
        record = _record()
        with pytest.raises((AttributeError, TypeError)):
            record.key = "other"  # type: ignore[misc]

    def test_defaults(self) -> None:
        record = FlagRecord(key="k")
        assert record.raw_value == "false"
        assert record.active_at == ""
        assert record.disabled_at == ""
        assert record.tags == ()

    def test_tags_keep_order(self) -> None:
        record = FlagRecord(key="k", tags=("beta", "ui", "beta"))
        assert record.tags == ("beta", "ui", "beta")


# ---------------------------------------------------------------------------
# Raw value parsing
# ---------------------------------------------------------------------------


class TestParseRawValue:
    @pytest.mark.parametrize("raw", ["false", "True", "TRUE", "1", "yes", "", "not-a-boolean"])
    def test_only_exact_true_is_enabled(self, raw: str) -> None:
        assert parse_raw_value(raw) is False

    def test_true_text(self) -> None:
        assert parse_raw_value("true") is True

    def test_literal_true_and_false(self) -> None:
        assert parse_raw_value("true", literal=True) is True
        assert parse_raw_value(" false ", literal=True) is False

    @pytest.mark.parametrize("raw", ["1", '"true"', "null", "{", "True", ""])
    def test_literal_non_boolean_is_false(self, raw: str) -> None:
        assert parse_raw_value(raw, literal=True) is False

    def test_non_text_raw_value_is_false(self) -> None:
        assert parse_raw_value(None) is False
        assert parse_raw_value(None, literal=True) is False


# ---------------------------------------------------------------------------
# evaluate_record
# ---------------------------------------------------------------------------


class TestEvaluateRecord:
    def test_absent_record_is_disabled(self) -> None:
        assert evaluate_record(None, NOW) is False

    def test_true_without_dates_is_enabled(self) -> None:
        assert evaluate_record(_record("true"), NOW) is True

    @pytest.mark.parametrize(
        ("active_at", "disabled_at"),
        [
            ("", ""),
            (_iso(NOW - timedelta(days=1)), ""),
            ("", _iso(NOW + timedelta(days=1))),
            (_iso(NOW + timedelta(days=1)), ""),
        ],
    )
    def test_false_is_disabled_regardless_of_dates(self, active_at: str, disabled_at: str) -> None:
        assert evaluate_record(_record("false", active_at, disabled_at), NOW) is False

    def test_disabled_at_in_past_wins_over_true(self) -> None:
        record = _record("true", disabled_at=_iso(NOW - timedelta(days=1)))
        assert evaluate_record(record, NOW) is False

    def test_future_active_at_is_disabled(self) -> None:
        record = _record("true", active_at=_iso(NOW + timedelta(days=1)))
        assert evaluate_record(record, NOW) is False

    def test_future_active_at_is_disabled_even_as_literal(self) -> None:
        record = _record("true", active_at=_iso(NOW + timedelta(days=1)))
        assert evaluate_record(record, NOW, literal_values=True) is False

    def test_past_active_at_is_enabled(self) -> None:
        record = _record("true", active_at=_iso(NOW - timedelta(days=1)))
        assert evaluate_record(record, NOW) is True

    def test_inside_window_uses_raw_value(self) -> None:
        active = _iso(NOW - timedelta(days=1))
        disabled = _iso(NOW + timedelta(days=1))
        assert evaluate_record(_record("true", active, disabled), NOW) is True
        assert evaluate_record(_record("false", active, disabled), NOW) is False

    def test_window_start_is_inclusive(self) -> None:
        assert evaluate_record(_record("true", active_at=_iso(NOW)), NOW) is True

    def test_window_end_is_exclusive(self) -> None:
        assert evaluate_record(_record("true", disabled_at=_iso(NOW)), NOW) is False

    def test_invalid_dates_are_ignored(self) -> None:
        record = _record("true", active_at="not-a-date", disabled_at="also-not-a-date")
        assert evaluate_record(record, NOW) is True

    def test_invalid_disabled_at_never_disables(self) -> None:
        record = _record("true", active_at=_iso(NOW - timedelta(hours=1)), disabled_at="2024-13-45")
        assert evaluate_record(record, NOW) is True

    def test_invalid_active_at_never_blocks(self) -> None:
        record = _record("true", active_at="soon", disabled_at=_iso(NOW + timedelta(hours=1)))
        assert evaluate_record(record, NOW) is True

    def test_disabled_in_past_beats_active_in_future(self) -> None:
        record = _record(
            "true",
            active_at=_iso(NOW + timedelta(days=1)),
            disabled_at=_iso(NOW - timedelta(days=1)),
        )
        assert evaluate_record(record, NOW) is False

    def test_disabled_in_past_scenario(self) -> None:
        record = FlagRecord(key="x", raw_value="true", active_at="", disabled_at="2020-01-01T00:00:00Z")
        assert evaluate_record(record, datetime(2024, 1, 1, tzinfo=UTC)) is False

    def test_active_in_far_future_scenario(self) -> None:
        record = FlagRecord(key="y", raw_value="true", active_at="2099-01-01T00:00:00Z", disabled_at="")
        assert evaluate_record(record, datetime(2024, 1, 1, tzinfo=UTC)) is False

    def test_offsets_are_compared_as_instants(self) -> None:
        # 13:00+02:00 is 11:00 UTC, one hour before NOW.
        record = _record("true", disabled_at="2024-06-15T13:00:00+02:00")
        assert evaluate_record(record, NOW) is False

    def test_naive_timestamps_are_utc(self) -> None:
        record = _record("true", active_at="2024-06-15T12:30:00")
        assert evaluate_record(record, NOW) is False
        assert evaluate_record(record, NOW.replace(tzinfo=None) + timedelta(hours=1)) is True

    def test_date_only_timestamps(self) -> None:
        assert evaluate_record(_record("true", disabled_at="2024-06-15"), NOW) is False
        assert evaluate_record(_record("true", active_at="2024-06-16"), NOW) is False

    def test_garbage_raw_value_is_disabled(self) -> None:
        assert evaluate_record(_record("not-a-boolean"), NOW) is False
        assert evaluate_record(_record("not-a-boolean"), NOW, literal_values=True) is False


# ---------------------------------------------------------------------------
# evaluate_boolean
# ---------------------------------------------------------------------------


class TestEvaluateBoolean:
    def test_absent_is_false(self) -> None:
        assert evaluate_boolean(None) is False

    def test_passes_booleans_through(self) -> None:
        assert evaluate_boolean(True) is True
        assert evaluate_boolean(False) is False


# ---------------------------------------------------------------------------
# Payload normalisation
# ---------------------------------------------------------------------------


class TestNormalizeRecords:
    def test_list_of_features(self) -> None:
        records = normalize_records(
            [
                {"key": "a", "value": "true", "activeAt": "2024-01-01", "disabledAt": "", "tags": ["x"]},
                {"Key": "b", "Value": "false", "ActiveAt": None, "DisabledAt": "2025-01-01", "Tags": None},
            ]
        )
        assert records["a"] == FlagRecord("a", "true", "2024-01-01", "", ("x",))
        assert records["b"] == FlagRecord("b", "false", "", "2025-01-01", ())

    def test_malformed_tags_do_not_break_other_records(self) -> None:
        records = normalize_records(
            [
                {"key": "good", "value": "true"},
                {"key": "count", "value": "true", "tags": 5},
                {"key": "flag", "value": "true", "tags": True},
                {"key": "lone", "value": "true", "tags": "ops"},
                {"key": "map", "value": "true", "tags": {"team": "ops"}},
            ]
        )
        assert list(records) == ["good", "count", "flag", "lone", "map"]
        assert records["count"].tags == ()
        assert records["flag"].tags == ()
        assert records["lone"].tags == ("ops",)
        assert records["map"].tags == ()
        assert evaluate_record(records["count"], NOW) is True

    def test_entries_without_key_are_dropped(self) -> None:
        records = normalize_records([{"value": "true"}, {"key": "", "value": "true"}, "junk", None])
        assert records == {}

    def test_keyed_object_uses_mapping_key(self) -> None:
        records = normalize_records({"checkout": {"value": "true", "activeAt": "", "disabledAt": ""}})
        assert records["checkout"].key == "checkout"
        assert records["checkout"].raw_value == "true"

    def test_boolean_values_become_text(self) -> None:
        records = normalize_records([{"key": "a", "value": True}, {"key": "b", "value": False}])
        assert records["a"].raw_value == "true"
        assert records["b"].raw_value == "false"

    def test_last_duplicate_wins(self) -> None:
        records = normalize_records([{"key": "a", "value": "true"}, {"key": "a", "value": "false"}])
        assert records["a"].raw_value == "false"

    def test_snake_case_fields(self) -> None:
        records = normalize_records([{"key": "a", "raw_value": "true", "active_at": "2024-01-01"}])
        assert records["a"].active_at == "2024-01-01"

    def test_accepts_ready_records(self) -> None:
        record = FlagRecord("a", "true")
        assert normalize_records([record]) == {"a": record}

    def test_none_payload(self) -> None:
        assert normalize_records(None) == {}


class TestNormalizeBooleans:
    def test_keyed_object(self) -> None:
        flags = normalize_booleans({"a": True, "b": False, "c": "true", "d": "yes", "e": 1})
        assert flags == {"a": True, "b": False, "c": True, "d": False, "e": False}

    def test_list_of_key_value_objects(self) -> None:
        flags = normalize_booleans([{"key": "a", "value": "true"}, {"Key": "b", "Value": True}, {"value": True}])
        assert flags == {"a": True, "b": True}

    def test_keyed_feature_objects(self) -> None:
        assert normalize_booleans({"a": {"value": "true"}}) == {"a": True}


class TestNormalizePayload:
    def test_kinds(self) -> None:
        assert FLAG_KINDS == ("record", "boolean")

    def test_record_kind(self) -> None:
        assert normalize_payload({"a": {"value": "true"}}) == {"a": FlagRecord("a", "true")}

    def test_boolean_kind(self) -> None:
        assert normalize_payload({"a": {"value": "true"}}, "boolean") == {"a": True}

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError):
            normalize_payload({}, "bitmap")
