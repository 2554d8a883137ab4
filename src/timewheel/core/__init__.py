"""Index-based time selection core: option lists, mapping and wheel sync."""
from __future__ import annotations

from .convention import ConventionProbe, FixedConvention, LocaleConventionProbe
from .engine import SyncMode, TimePickerDataSource
from .interval import SelectionInterval
from .mapper import Meridiem, SelectionIndices, SelectionState, TimeIndexMapper
from .options import OptionSet, build_option_set
from .timeutil import WallClock, parse_time_token
from .wheel import MemoryWheel, Wheel

__all__ = [
    "ConventionProbe",
    "FixedConvention",
    "LocaleConventionProbe",
    "MemoryWheel",
    "Meridiem",
    "OptionSet",
    "SelectionIndices",
    "SelectionInterval",
    "SelectionState",
    "SyncMode",
    "TimeIndexMapper",
    "TimePickerDataSource",
    "WallClock",
    "Wheel",
    "build_option_set",
    "parse_time_token",
]
