"""
Cross-wheel synchronization for the hour / minute / meridiem pickers.

The minute wheel carries one block of minute values per hour index (24
blocks), so the hour and minute wheels can scroll into each other: rolling
the minutes past :55 lands in the next hour's block, and the hour wheel
follows. Under the 12-hour convention the hour wheel holds the AM cycle
followed by the PM cycle, and the meridiem wheel follows the half the hour
wheel is in.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from enum import Enum
from functools import cached_property
from typing import Callable, Dict, Optional

from .convention import ConventionProbe, LocaleConventionProbe
from .interval import SelectionInterval
from .mapper import (
    Meridiem,
    SelectionIndices,
    SelectionState,
    TimeIndexMapper,
    first_index,
)
from .options import OptionSet, build_option_set
from .timeutil import TimeLike, WallClock
from .wheel import Wheel

LOGGER = logging.getLogger(__name__)

THIRD_WIDTH = 0.333
HALF_WIDTH = 0.5


class SyncMode(Enum):
    # Edits to one wheel move the other wheels' indices only.
    DISPLAY = "display"
    # Edits that cross an hour block go through the hour transition.
    CANONICAL = "canonical"


def _in_range(index: int, length: int, wheel: str) -> int:
    if 0 <= index < length:
        return index
    LOGGER.debug("%s index %r outside [0, %d); using 0", wheel, index, length)
    return 0


class TimePickerDataSource:
    def __init__(
        self,
        hours_wheel: Optional[Wheel],
        minutes_wheel: Optional[Wheel],
        meridiem_wheel: Optional[Wheel] = None,
        interval: SelectionInterval = SelectionInterval.FIVE_MINUTES,
        *,
        probe: Optional[ConventionProbe] = None,
        clock: Optional[WallClock] = None,
        on_time_selected: Optional[Callable[[datetime], None]] = None,
        sync_mode: SyncMode = SyncMode.DISPLAY,
    ) -> None:
        self.interval = interval
        self.probe = probe or LocaleConventionProbe()
        self.clock = clock or WallClock()
        self.on_time_selected = on_time_selected
        self.sync_mode = sync_mode
        self._wheels: Dict[str, Optional[Wheel]] = {
            "hour": hours_wheel,
            "minute": minutes_wheel,
            "meridiem": meridiem_wheel,
        }
        self._busy = False

    # --- Cached for the picker's lifetime ---

    @cached_property
    def uses_24_hour(self) -> bool:
        return bool(self.probe.uses_24_hour())

    @cached_property
    def options(self) -> OptionSet:
        labels = self.probe.meridiem_symbols() if not self.uses_24_hour else ("AM", "PM")
        return build_option_set(self.interval, self.uses_24_hour, labels)

    @cached_property
    def mapper(self) -> TimeIndexMapper:
        return TimeIndexMapper(self.options, self.clock)

    @cached_property
    def state(self) -> SelectionState:
        return SelectionState(
            hour_value=self.options.hours[0],
            minute_value=self.options.minutes[0],
            meridiem=None if self.uses_24_hour else Meridiem.AM,
        )

    @cached_property
    def _shown(self) -> Dict[str, Optional[int]]:
        return {"hour": 0, "minute": 0, "meridiem": None if self.uses_24_hour else 0}

    @property
    def indices(self) -> SelectionIndices:
        """Index each wheel has been told to show."""
        return SelectionIndices(**self._shown)

    # --- Setup ---

    def setup(self, initial_time: Optional[TimeLike] = None) -> None:
        options = self.options
        hours, minutes, meridiem = (self._wheels[k] for k in ("hour", "minute", "meridiem"))
        if hours is not None:
            hours.set_options(options.hour_titles)
        if minutes is not None:
            minutes.set_options(options.minute_titles)

        if options.meridiem_labels is not None:
            if meridiem is not None:
                meridiem.set_options(options.meridiem_labels)
                meridiem.set_visible(True)
            for wheel in (hours, minutes, meridiem):
                if wheel is not None:
                    wheel.set_relative_width(THIRD_WIDTH)
        else:
            if meridiem is not None:
                meridiem.set_visible(False)
            for wheel in (hours, minutes):
                if wheel is not None:
                    wheel.set_relative_width(HALF_WIDTH)

        LOGGER.debug(
            "picker setup: %s clock, %d-minute interval, %d minute options",
            "24h" if options.uses_24_hour else "12h",
            self.interval.minutes_between_options,
            len(options.minutes),
        )
        if initial_time is not None:
            self._seed(initial_time)

    def select_time(self, value: TimeLike) -> None:
        """Move all wheels to ``value`` and notify the handler."""
        if self._busy:
            LOGGER.debug("ignoring select_time(%s) during another edit", value)
            return
        self._seed(value)
        self._emit()

    def _seed(self, value: TimeLike) -> None:
        indices = self.mapper.indices_for_time(value)
        seeded = self.mapper.state_for_indices(indices)
        was_busy, self._busy = self._busy, True
        try:
            self._write("hour", indices.hour)
            self._write("minute", indices.minute)
            if indices.meridiem is not None:
                self._write("meridiem", indices.meridiem)
            self.state.hour_value = seeded.hour_value
            self.state.minute_value = seeded.minute_value
            self.state.meridiem = seeded.meridiem
        finally:
            self._busy = was_busy

    # --- Wheel edits ---

    def hour_picker_updated(self, index: int) -> None:
        self._transition("hour", self._apply_hour, index)

    def minute_picker_updated(self, index: int) -> None:
        self._transition("minute", self._apply_minute, index)

    def meridiem_picker_updated(self, index: int) -> None:
        self._transition("meridiem", self._apply_meridiem, index)

    def selected_time(self, reference: Optional[date] = None) -> datetime:
        return self.mapper.time_from_state(self.state, reference)

    def _transition(self, wheel: str, apply: Callable[[int], bool], index: int) -> None:
        if self._busy:
            LOGGER.debug("ignoring nested %s edit to %r", wheel, index)
            return
        self._busy = True
        try:
            changed = apply(index)
        finally:
            self._busy = False
        if changed:
            self._emit()

    def _apply_hour(self, index: int) -> bool:
        options = self.options
        index = self._accept("hour", index, len(options.hours))
        self.state.hour_value = options.hours[index]

        if not self.uses_24_hour:
            half = Meridiem.for_hour_of_day(index)
            if half.value != self._shown["meridiem"]:
                self._write("meridiem", half.value)
            if self.sync_mode is SyncMode.CANONICAL:
                self.state.meridiem = half

        # Keep the same minute value, inside the new hour's block.
        offset = first_index(options.minutes, self.state.minute_value)
        self._write("minute", offset + options.block_size * index)
        return True

    def _apply_minute(self, index: int) -> bool:
        options = self.options
        index = self._accept("minute", index, len(options.minutes))
        self.state.minute_value = options.minutes[index]

        implied_hour = index // options.block_size
        if implied_hour != self._shown["hour"]:
            self._write("hour", implied_hour)
            if self.sync_mode is SyncMode.CANONICAL:
                self._apply_hour(implied_hour)
        return True

    def _apply_meridiem(self, index: int) -> bool:
        if self.uses_24_hour:
            LOGGER.debug("meridiem edit ignored under 24-hour clock")
            return False
        # Any index other than 0 reads as PM.
        self.state.meridiem = Meridiem.for_index(index)
        if index != self.state.meridiem.value:
            self._write("meridiem", self.state.meridiem.value)
        else:
            self._shown["meridiem"] = index

        hour_index = first_index(self.options.hours, self.state.hour_value)
        if self.state.meridiem is Meridiem.PM:
            hour_index += 12
        self._write("hour", hour_index)
        return self._apply_hour(hour_index)

    def _accept(self, wheel: str, index: int, length: int) -> int:
        """Record the edited wheel's index, moving the wheel back into range if needed."""
        accepted = _in_range(index, length, wheel)
        if accepted != index:
            self._write(wheel, accepted)
        else:
            self._shown[wheel] = accepted
        return accepted

    def _write(self, wheel: str, index: int) -> None:
        self._shown[wheel] = index
        handle = self._wheels[wheel]
        if handle is not None:
            handle.set_selected_index(index)

    def _emit(self) -> None:
        if self.on_time_selected is None:
            return
        selected = self.selected_time()
        LOGGER.debug("selected time %s", selected.strftime("%H:%M"))
        self.on_time_selected(selected)
