import pytest

from timewheel.core.interval import SelectionInterval


@pytest.mark.parametrize("minutes", [1, 5, 15, 30])
def test_from_minutes_round_trips_supported_values(minutes):
    assert SelectionInterval.from_minutes(minutes).minutes_between_options == minutes


@pytest.mark.parametrize("minutes", [0, 2, 10, 60, -5])
def test_from_minutes_rejects_other_values(minutes):
    with pytest.raises(ValueError, match="interval must be one of 1, 5, 15, 30"):
        SelectionInterval.from_minutes(minutes)
