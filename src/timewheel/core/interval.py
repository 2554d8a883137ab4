from __future__ import annotations

from enum import Enum


class SelectionInterval(Enum):
    """Minute granularity of the minute wheel."""

    MINUTE = 1
    FIVE_MINUTES = 5
    FIFTEEN_MINUTES = 15
    HALF_HOUR = 30

    @property
    def minutes_between_options(self) -> int:
        return self.value

    @classmethod
    def from_minutes(cls, minutes: int) -> "SelectionInterval":
        for member in cls:
            if member.value == minutes:
                return member
        allowed = ", ".join(str(m.value) for m in cls)
        raise ValueError(f"interval must be one of {allowed} minutes, got {minutes!r}")
