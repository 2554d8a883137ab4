from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Sequence

from .options import OptionSet
from .timeutil import TimeLike, WallClock


class Meridiem(Enum):
    AM = 0
    PM = 1

    @classmethod
    def for_index(cls, index: int) -> "Meridiem":
        return cls.AM if index == 0 else cls.PM

    @classmethod
    def for_hour_of_day(cls, hour: int) -> "Meridiem":
        return cls.AM if hour < 12 else cls.PM


@dataclass
class SelectionState:
    """Authoritative selection. ``hour_value`` is the wheel's display value, not its index."""

    hour_value: int = 0
    minute_value: int = 0
    meridiem: Optional[Meridiem] = None


@dataclass(frozen=True)
class SelectionIndices:
    hour: int
    minute: int
    meridiem: Optional[int] = None


def first_index(values: Sequence[int], value: int) -> int:
    """First position of ``value``; 0 when it is absent."""
    try:
        return list(values).index(value)
    except ValueError:
        return 0


def hour_in_24_hour_time(hour_value: int, meridiem: Optional[Meridiem]) -> int:
    if meridiem is None:
        return hour_value % 24
    if hour_value == 12:
        return 0 if meridiem is Meridiem.AM else 12
    if meridiem is Meridiem.PM:
        return (hour_value + 12) % 24
    return hour_value % 24


class TimeIndexMapper:
    def __init__(self, options: OptionSet, clock: WallClock) -> None:
        self.options = options
        self.clock = clock

    def minute_index(self, hour_index: int, minute_of_hour: int) -> int:
        # Ceiling to the next boundary inside the hour's block; wrap to the
        # block's first entry past the last boundary.
        start, end = self.options.block_bounds(hour_index)
        block = self.options.minutes[start:end]
        offset = next((i for i, value in enumerate(block) if value >= minute_of_hour), 0)
        return start + offset

    def indices_for_time(self, value: TimeLike) -> SelectionIndices:
        hour, minute = self.clock.components(value)
        meridiem_index = None
        if not self.options.uses_24_hour:
            meridiem_index = Meridiem.for_hour_of_day(hour).value
        return SelectionIndices(
            hour=hour,
            minute=self.minute_index(hour, minute),
            meridiem=meridiem_index,
        )

    def state_for_indices(self, indices: SelectionIndices) -> SelectionState:
        meridiem = None
        if indices.meridiem is not None and not self.options.uses_24_hour:
            meridiem = Meridiem.for_index(indices.meridiem)
        return SelectionState(
            hour_value=self.options.hours[indices.hour],
            minute_value=self.options.minutes[indices.minute],
            meridiem=meridiem,
        )

    def time_from_state(self, state: SelectionState, reference: Optional[date] = None) -> datetime:
        hour = hour_in_24_hour_time(state.hour_value, state.meridiem)
        return self.clock.at(hour, state.minute_value, 0, day=reference)
