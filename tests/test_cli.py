from __future__ import annotations

import pytest

from timewheel import cli


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("TIMEWHEEL_SETTINGS", str(tmp_path / "settings.json"))


def test_options_lists_12_hour_wheels(capsys):
    cli.main(["options", "--clock", "12h", "--interval", "15"])
    out = capsys.readouterr().out
    assert "Clock: 12h" in out
    assert "Hours: 12 1 2 3 4 5 6 7 8 9 10 11 12 1" in out
    assert "Minutes (4 per hour): 00 15 30 45" in out
    assert "Meridiem: AM PM" in out


def test_pick_applies_edits_in_order(capsys):
    cli.main(["pick", "--clock", "12h", "--interval", "5", "--time", "14:37", "--edit", "meridiem:0", "--edit", "minute:63"])
    out = capsys.readouterr().out.splitlines()
    assert "meridiem -> 0: 02:40" in out
    assert "minute -> 63: 02:15" in out
    assert "hour: index=5 title=5" in out
    assert "minute: index=63 title=15" in out
    assert "meridiem: index=0 title=AM" in out
    assert out[-1] == "Selected: 02:15"


def test_pick_canonical_mode(capsys):
    cli.main(["pick", "--clock", "12h", "--time", "14:37", "--mode", "canonical", "--edit", "minute:63"])
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Selected: 05:15"


def test_pick_24_hour_hides_meridiem_and_ignores_its_edits(capsys):
    cli.main(["pick", "--clock", "24h", "--interval", "15", "--time", "0910", "--edit", "meridiem:1"])
    out = capsys.readouterr().out.splitlines()
    assert "meridiem -> 1: (ignored)" in out
    assert not any(line.startswith("meridiem: index") for line in out)
    assert "minute: index=37 title=15" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["pick", "--time", "25:00"],
        ["pick", "--interval", "7"],
        ["pick", "--edit", "seconds:3"],
        ["options", "--clock", "36h"],
    ],
)
def test_bad_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2


def test_no_command_prints_help(capsys):
    cli.main([])
    assert "usage: timewheel" in capsys.readouterr().out


def test_pick_moves_out_of_range_edits_back_onto_the_wheels(capsys):
    cli.main(["pick", "--clock", "12h", "--time", "14:37", "--edit", "hour:99", "--edit", "minute:999"])
    out = capsys.readouterr().out.splitlines()
    assert "hour: index=0 title=12" in out
    assert "minute: index=0 title=00" in out


def test_gui_passes_sync_mode(monkeypatch):
    pytest.importorskip("ttkbootstrap")
    from timewheel.core.engine import SyncMode

    seen = {}

    def fake_main(settings, initial_time, sync_mode):
        seen.update(settings=settings, initial_time=initial_time, sync_mode=sync_mode)

    monkeypatch.setattr("timewheel.ui.app.main", fake_main)
    cli.main(["gui", "--clock", "24h", "--mode", "canonical"])
    assert seen["sync_mode"] is SyncMode.CANONICAL
    assert seen["settings"].clock == "24h"
    assert seen["initial_time"] is None
