"""Picker settings stored as JSON under the user's local app data."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timewheel.core.convention import ConventionProbe, FixedConvention, LocaleConventionProbe
from timewheel.core.interval import SelectionInterval
from timewheel.core.timeutil import WallClock

LOGGER = logging.getLogger(__name__)

CLOCK_CHOICES = ("system", "12h", "24h")
THEME_CHOICES = ("system", "light", "dark")


@dataclass
class PickerSettings:
    interval: int = SelectionInterval.FIVE_MINUTES.value
    clock: str = "system"
    timezone: Optional[str] = None
    meridiem_labels: Optional[Tuple[str, str]] = None
    theme: str = "system"
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    def selection_interval(self) -> SelectionInterval:
        return SelectionInterval.from_minutes(self.interval)

    def convention(self) -> ConventionProbe:
        if self.clock == "system":
            if self.meridiem_labels:
                probe = LocaleConventionProbe()
                return FixedConvention(probe.uses_24_hour(), self.meridiem_labels)
            return LocaleConventionProbe()
        return FixedConvention(self.clock == "24h", self.meridiem_labels or ("AM", "PM"))

    def wall_clock(self) -> WallClock:
        if not self.timezone:
            return WallClock()
        return WallClock(ZoneInfo(self.timezone))

    def to_json(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra")
        if data["meridiem_labels"] is not None:
            data["meridiem_labels"] = list(data["meridiem_labels"])
        return {**extra, **data}


def settings_path() -> Path:
    override = os.environ.get("TIMEWHEEL_SETTINGS")
    if override:
        return Path(override)
    base = os.environ.get("LOCALAPPDATA") or str(Path.home())
    return Path(base) / "TimeWheel" / "settings.json"


def _coerce(raw: Dict[str, Any]) -> PickerSettings:
    settings = PickerSettings()
    known = {"interval", "clock", "timezone", "meridiem_labels", "theme"}
    settings.extra = {k: v for k, v in raw.items() if k not in known}

    interval = raw.get("interval", settings.interval)
    try:
        settings.interval = SelectionInterval.from_minutes(int(interval)).value
    except (TypeError, ValueError) as exc:
        LOGGER.warning("ignoring interval setting: %s", exc)

    clock = raw.get("clock", settings.clock)
    if clock in CLOCK_CHOICES:
        settings.clock = clock
    else:
        LOGGER.warning("ignoring clock setting %r; expected one of %s", clock, ", ".join(CLOCK_CHOICES))

    tz_name = raw.get("timezone")
    if tz_name:
        try:
            ZoneInfo(str(tz_name))
            settings.timezone = str(tz_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            LOGGER.warning("ignoring unknown timezone %r: %s", tz_name, exc)

    labels = raw.get("meridiem_labels")
    if labels is not None:
        if isinstance(labels, (list, tuple)) and len(labels) == 2 and all(isinstance(x, str) and x for x in labels):
            settings.meridiem_labels = (labels[0], labels[1])
        else:
            LOGGER.warning("ignoring meridiem_labels %r; expected two non-empty strings", labels)

    theme = raw.get("theme", settings.theme)
    if theme in THEME_CHOICES:
        settings.theme = theme
    else:
        LOGGER.warning("ignoring theme setting %r", theme)
    return settings


def load_settings(path: Optional[Path] = None) -> PickerSettings:
    path = path or settings_path()
    if not path.exists():
        return PickerSettings()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.warning("could not read settings from %s: %s", path, exc)
        return PickerSettings()
    if not isinstance(raw, dict):
        LOGGER.warning("settings file %s does not hold an object; using defaults", path)
        return PickerSettings()
    return _coerce(raw)


def save_settings(settings: PickerSettings, path: Optional[Path] = None) -> Path:
    path = path or settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_json(), indent=2), encoding="utf-8")
    return path
