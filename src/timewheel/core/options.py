from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .interval import SelectionInterval

HOURS_PER_DAY = 24

# One 12-hour cycle as shown on the wheel; the list holds it twice (AM, PM).
_TWELVE_HOUR_CYCLE = (12, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)


@dataclass(frozen=True)
class OptionSet:
    hours: Tuple[int, ...]
    minutes: Tuple[int, ...]
    meridiem_labels: Optional[Tuple[str, str]]

    @property
    def uses_24_hour(self) -> bool:
        return self.meridiem_labels is None

    @property
    def block_size(self) -> int:
        """Number of minute entries belonging to one hour index."""
        return len(self.minutes) // HOURS_PER_DAY

    @property
    def hour_titles(self) -> Tuple[str, ...]:
        return tuple(str(h) for h in self.hours)

    @property
    def minute_titles(self) -> Tuple[str, ...]:
        return tuple(f"{m:02d}" for m in self.minutes)

    def block_bounds(self, hour_index: int) -> Tuple[int, int]:
        start = self.block_size * hour_index
        return start, start + self.block_size


def build_option_set(
    interval: SelectionInterval,
    uses_24_hour: bool,
    meridiem_labels: Sequence[str] = ("AM", "PM"),
) -> OptionSet:
    if uses_24_hour:
        hours = tuple(range(HOURS_PER_DAY))
        labels = None
    else:
        hours = _TWELVE_HOUR_CYCLE * 2
        labels = (str(meridiem_labels[0]), str(meridiem_labels[1]))

    block = tuple(range(0, 60, interval.minutes_between_options))
    return OptionSet(hours=hours, minutes=block * HOURS_PER_DAY, meridiem_labels=labels)
