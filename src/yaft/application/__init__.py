"""Application layer – feature toggles."""

from yaft.application.toggles import (
    BooleanFlagStore,
    FlagRecord,
    FlagStore,
    RecordFlagStore,
    ToggleResolver,
    feature_toggle,
    set_flag_store,
)

__all__ = [
    "BooleanFlagStore",
    "FlagRecord",
    "FlagStore",
    "RecordFlagStore",
    "ToggleResolver",
    "feature_toggle",
    "set_flag_store",
]
