"""Config settings – ToggleSettings and flag store construction."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from yaft.adapters.sources import ApiFlagSource, JsonFileFlagSource
from yaft.application.toggles import FLAG_KINDS, BooleanFlagStore, RecordFlagStore
from yaft.application.toggles.store import FlagDataSource, FlagStore
from yaft.config.settings.base import Settings
from yaft.config.validation import InvalidSettingValueError, MissingRequiredSettingError
from yaft.kernel.time import Clock

logger = logging.getLogger(__name__)

SOURCES = frozenset({"file", "api", "none"})


@dataclasses.dataclass
class ToggleSettings(Settings):
    """Where flags come from and how they are stored.

    Read from ``YAFT_*`` environment variables by :class:`EnvSettingsLoader`,
    e.g. ``YAFT_SOURCE=api``, ``YAFT_API_URL=https://flags.internal``.
    """

    _prefix: ClassVar[str] = "YAFT"

    source: str = "file"
    kind: str = "record"
    config_path: str = "flags.json"
    api_url: str = ""
    base_uuid: str = ""
    http_timeout: float = 10.0
    literal_values: bool = False

    def _validate(self) -> None:
        if self.source not in SOURCES:
            raise InvalidSettingValueError("YAFT_SOURCE", self.source, f"expected one of {sorted(SOURCES)}")
        if self.kind not in FLAG_KINDS:
            raise InvalidSettingValueError("YAFT_KIND", self.kind, f"expected one of {list(FLAG_KINDS)}")
        if self.http_timeout <= 0:
            raise InvalidSettingValueError("YAFT_HTTP_TIMEOUT", self.http_timeout, "must be positive")
        if self.source == "api":
            if not self.api_url:
                raise MissingRequiredSettingError("YAFT_API_URL")
            if not self.base_uuid:
                raise MissingRequiredSettingError("YAFT_BASE_UUID")


def build_flag_store(
    settings: ToggleSettings,
    *,
    clock: Clock | None = None,
) -> tuple[FlagStore, FlagDataSource | None]:
    """Create the store and data source described by *settings*.

    File sources are loaded immediately. API sources are returned unsynced;
    run ``await source.sync(store)`` before declaring toggles.
    """
    store: FlagStore
    if settings.kind == "record":
        store = RecordFlagStore(clock=clock, literal_values=settings.literal_values)
    else:
        store = BooleanFlagStore()

    source: FlagDataSource | None = None
    if settings.source == "file":
        source = JsonFileFlagSource(settings.config_path, kind=settings.kind)
        store.refresh(source)
    elif settings.source == "api":
        source = ApiFlagSource(
            settings.api_url,
            settings.base_uuid,
            kind=settings.kind,
            timeout=settings.http_timeout,
        )

    logger.info("flag_store.built kind=%s source=%s", settings.kind, settings.source)
    return store, source


__all__ = ["ToggleSettings", "build_flag_store"]
