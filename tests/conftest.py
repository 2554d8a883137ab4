from __future__ import annotations
from datetime import datetime
from types import SimpleNamespace
from typing import List
from zoneinfo import ZoneInfo

import pytest

from timewheel.core.convention import FixedConvention
from timewheel.core.engine import SyncMode, TimePickerDataSource
from timewheel.core.interval import SelectionInterval
from timewheel.core.timeutil import WallClock
from timewheel.core.wheel import MemoryWheel

CT = ZoneInfo("America/Chicago")
TODAY = datetime(2024, 5, 6, 12, 0, tzinfo=CT)


@pytest.fixture
def wall_clock() -> WallClock:
    return WallClock(CT, now=lambda: TODAY)


@pytest.fixture
def make_picker(wall_clock: WallClock):
    def _make(clock: str = "12h", interval: int = 5, mode: SyncMode = SyncMode.DISPLAY, with_meridiem_wheel: bool = True):
        emitted: List[datetime] = []
        hour, minute = MemoryWheel("hour"), MemoryWheel("minute")
        meridiem = MemoryWheel("meridiem") if with_meridiem_wheel else None
        picker = TimePickerDataSource(
            hour,
            minute,
            meridiem,
            SelectionInterval.from_minutes(interval),
            probe=FixedConvention(clock == "24h"),
            clock=wall_clock,
            on_time_selected=emitted.append,
            sync_mode=mode,
        )
        ctx = SimpleNamespace(picker=picker, hour=hour, minute=minute, meridiem=meridiem, emitted=emitted)
        ctx.turn = lambda wheel, index: _turn(ctx, wheel, index)
        ctx.check = lambda: assert_consistent(ctx)
        return ctx

    return _make


def _turn(ctx, wheel: str, index: int) -> None:
    """Scroll a wheel the way a user would, then report it to the picker."""
    handle = getattr(ctx, wheel)
    if handle is not None:
        handle.selected_index = index
    getattr(ctx.picker, f"{wheel}_picker_updated")(index)


def assert_consistent(ctx) -> None:
    """Every tracked index is in range and the minute sits in the hour's block."""
    picker = ctx.picker
    options = picker.options
    indices = picker.indices
    assert 0 <= indices.hour < len(options.hours)
    assert 0 <= indices.minute < len(options.minutes)
    start, end = options.block_bounds(indices.hour)
    assert start <= indices.minute < end
    assert ctx.hour.selected_index == indices.hour
    assert ctx.minute.selected_index == indices.minute
    if options.uses_24_hour:
        assert indices.meridiem is None
        assert picker.state.meridiem is None
    else:
        assert indices.meridiem in (0, 1)
        if ctx.meridiem is not None:
            assert ctx.meridiem.selected_index == indices.meridiem
