"""Application toggles – flag records, evaluation, stores and decoration-time resolution."""
from yaft.application.toggles.decorators import feature_toggle
from yaft.application.toggles.evaluation import evaluate_boolean, evaluate_record, parse_raw_value
from yaft.application.toggles.in_memory import BooleanFlagStore, RecordFlagStore
from yaft.application.toggles.record import (
    FLAG_KINDS,
    FlagRecord,
    normalize_booleans,
    normalize_payload,
    normalize_records,
)
from yaft.application.toggles.registry import clear_flag_store, get_flag_store, set_flag_store
from yaft.application.toggles.resolver import ToggleResolver, choose_class, choose_method
from yaft.application.toggles.store import FlagDataSource, FlagStore
from yaft.application.toggles.stub import is_stub, make_noop, synthesize_stub

__all__ = [
    "FLAG_KINDS",
    "BooleanFlagStore",
    "FlagDataSource",
    "FlagRecord",
    "FlagStore",
    "RecordFlagStore",
    "ToggleResolver",
    "choose_class",
    "choose_method",
    "clear_flag_store",
    "evaluate_boolean",
    "evaluate_record",
    "feature_toggle",
    "get_flag_store",
    "is_stub",
    "make_noop",
    "normalize_booleans",
    "normalize_payload",
    "normalize_records",
    "parse_raw_value",
    "set_flag_store",
    "synthesize_stub",
]
