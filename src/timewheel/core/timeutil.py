"""Wall-clock helpers: reading hour/minute and building times on a given day."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Callable, Optional, Tuple, Union

TimeLike = Union[datetime, time]

# Longest DST gap on record is two hours; leave headroom.
_GAP_SEARCH_LIMIT = timedelta(hours=4)


def local_tz() -> tzinfo:
    return datetime.now().astimezone().tzinfo or timezone.utc


def parse_time_token(token: str) -> Optional[time]:
    token = (token or "").strip()
    if not token:
        return None
    if token.isdigit() and len(token) in {3, 4}:
        padded = token.zfill(4)
        hour = int(padded[:2])
        minute = int(padded[2:])
    else:
        parts = token.split(":")
        if len(parts) != 2 or not parts[0].isdigit() or not parts[1].isdigit():
            return None
        hour = int(parts[0])
        minute = int(parts[1])
    if hour > 23 or minute > 59:
        return None
    return time(hour=hour, minute=minute)


def _exists(candidate: datetime) -> bool:
    roundtrip = candidate.astimezone(timezone.utc).astimezone(candidate.tzinfo)
    return roundtrip.replace(tzinfo=None) == candidate.replace(tzinfo=None)


class WallClock:
    def __init__(self, tz: Optional[tzinfo] = None, now: Optional[Callable[[], datetime]] = None) -> None:
        self.tz = tz or local_tz()
        self._now = now

    def now(self) -> datetime:
        if self._now is not None:
            current = self._now()
            if current.tzinfo is None:
                return current.replace(tzinfo=self.tz)
            return current.astimezone(self.tz)
        return datetime.now(tz=self.tz)

    def today(self) -> date:
        return self.now().date()

    def components(self, value: TimeLike) -> Tuple[int, int]:
        if isinstance(value, datetime) and value.tzinfo is not None:
            value = value.astimezone(self.tz)
        return value.hour, value.minute

    def at(self, hour: int, minute: int, second: int = 0, day: Optional[date] = None) -> datetime:
        """
        Wall time on ``day`` (default today).

        A repeated wall time resolves to its first occurrence; a wall time
        that falls in a DST gap resolves to the next one that exists.
        """
        day = day or self.today()
        wanted = datetime.combine(day, time(hour, minute, second), tzinfo=self.tz).replace(fold=0)
        if _exists(wanted):
            return wanted
        probe = wanted
        while probe - wanted < _GAP_SEARCH_LIMIT:
            probe = (probe + timedelta(minutes=1)).replace(second=0)
            if _exists(probe):
                return probe
        return wanted.astimezone(timezone.utc).astimezone(self.tz)
