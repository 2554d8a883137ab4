"""Locale clock convention: 12-hour with meridiem, or 24-hour."""
from __future__ import annotations

from datetime import datetime
from typing import Protocol, Tuple

DEFAULT_SYMBOLS = ("AM", "PM")


class ConventionProbe(Protocol):
    def uses_24_hour(self) -> bool: ...

    def meridiem_symbols(self) -> Tuple[str, str]: ...


class FixedConvention:
    def __init__(self, uses_24_hour: bool, symbols: Tuple[str, str] = DEFAULT_SYMBOLS) -> None:
        self._uses_24_hour = uses_24_hour
        self._symbols = (symbols[0], symbols[1])

    def uses_24_hour(self) -> bool:
        return self._uses_24_hour

    def meridiem_symbols(self) -> Tuple[str, str]:
        return self._symbols

    def __repr__(self) -> str:
        clock = "24h" if self._uses_24_hour else "12h"
        return f"FixedConvention({clock}, {self._symbols!r})"


class LocaleConventionProbe:
    """
    Reads the convention from the process's LC_TIME locale.

    The locale's own time format (%X) is rendered for an afternoon time; if
    neither meridiem symbol shows up in it, the locale is 24-hour. Callers
    that want the user's locale rather than "C" must run
    ``locale.setlocale(locale.LC_TIME, "")`` first.
    """

    _MORNING = datetime(2000, 1, 1, 9, 0)
    _EVENING = datetime(2000, 1, 1, 21, 0)

    def meridiem_symbols(self) -> Tuple[str, str]:
        am = self._MORNING.strftime("%p").strip()
        pm = self._EVENING.strftime("%p").strip()
        if not am or not pm:
            return DEFAULT_SYMBOLS
        return am, pm

    def uses_24_hour(self) -> bool:
        am = self._MORNING.strftime("%p").strip()
        pm = self._EVENING.strftime("%p").strip()
        if not am and not pm:
            return True
        rendered = self._EVENING.strftime("%X")
        return not ((am and am in rendered) or (pm and pm in rendered))
