from __future__ import annotations

import locale

import pytest

from timewheel.core.convention import FixedConvention, LocaleConventionProbe


@pytest.fixture
def c_time_locale():
    previous = locale.setlocale(locale.LC_TIME)
    locale.setlocale(locale.LC_TIME, "C")
    yield
    locale.setlocale(locale.LC_TIME, previous)


def test_fixed_convention_reports_what_it_was_given():
    probe = FixedConvention(False, ("vorm.", "nachm."))
    assert probe.uses_24_hour() is False
    assert probe.meridiem_symbols() == ("vorm.", "nachm.")
    assert "12h" in repr(probe)


def test_c_locale_is_24_hour(c_time_locale):
    probe = LocaleConventionProbe()
    assert probe.uses_24_hour() is True
    assert probe.meridiem_symbols() == ("AM", "PM")


def test_locale_with_meridiem_in_time_format(monkeypatch):
    formats = {"%p": {9: "AM", 21: "PM"}, "%X": {21: "9:00:00 PM"}}

    class FakeMoment:
        def __init__(self, hour):
            self.hour = hour

        def strftime(self, fmt):
            return formats[fmt].get(self.hour, "")

    monkeypatch.setattr(LocaleConventionProbe, "_MORNING", FakeMoment(9))
    monkeypatch.setattr(LocaleConventionProbe, "_EVENING", FakeMoment(21))
    probe = LocaleConventionProbe()
    assert probe.uses_24_hour() is False
    assert probe.meridiem_symbols() == ("AM", "PM")


def test_locale_without_meridiem_symbols_falls_back_to_defaults(monkeypatch):
    class Blank:
        def strftime(self, fmt):
            return "21:00:00" if fmt == "%X" else ""

    monkeypatch.setattr(LocaleConventionProbe, "_MORNING", Blank())
    monkeypatch.setattr(LocaleConventionProbe, "_EVENING", Blank())
    probe = LocaleConventionProbe()
    assert probe.uses_24_hour() is True
    assert probe.meridiem_symbols() == ("AM", "PM")
