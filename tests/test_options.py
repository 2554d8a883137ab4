from __future__ import annotations

import pytest

from timewheel.core.interval import SelectionInterval
from timewheel.core.options import build_option_set


@pytest.mark.parametrize("interval", list(SelectionInterval))
@pytest.mark.parametrize("uses_24_hour", [True, False])
def test_minute_list_is_24_equal_blocks(interval, uses_24_hour):
    options = build_option_set(interval, uses_24_hour)
    step = interval.minutes_between_options
    assert len(options.minutes) % 24 == 0
    assert options.block_size == 60 // step
    block = list(range(0, 60, step))
    for hour_index in range(24):
        start, end = options.block_bounds(hour_index)
        assert list(options.minutes[start:end]) == block


def test_24_hour_lists():
    options = build_option_set(SelectionInterval.FIFTEEN_MINUTES, True)
    assert options.hours == tuple(range(24))
    assert options.meridiem_labels is None
    assert options.uses_24_hour
    assert options.minute_titles[:4] == ("00", "15", "30", "45")


def test_12_hour_lists_repeat_cycle_for_am_and_pm():
    options = build_option_set(SelectionInterval.FIVE_MINUTES, False, ("a.m.", "p.m."))
    cycle = (12, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)
    assert options.hours[:12] == cycle
    assert options.hours[12:] == cycle
    assert options.meridiem_labels == ("a.m.", "p.m.")
    assert options.hour_titles[0] == "12"
    assert options.hour_titles[14] == "2"
    assert not options.uses_24_hour


def test_builder_is_deterministic():
    first = build_option_set(SelectionInterval.MINUTE, False)
    second = build_option_set(SelectionInterval.MINUTE, False)
    assert first == second
    assert len(first.minutes) == 24 * 60
