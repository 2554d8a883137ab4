from __future__ import annotations
import argparse
import locale
import logging
from datetime import datetime, time
from typing import List, Tuple

from timewheel.config import CLOCK_CHOICES, PickerSettings, load_settings
from timewheel.core.engine import SyncMode, TimePickerDataSource
from timewheel.core.interval import SelectionInterval
from timewheel.core.timeutil import parse_time_token
from timewheel.core.wheel import MemoryWheel
from timewheel.version import APP_VERSION

LOGGER = logging.getLogger(__name__)

WHEEL_NAMES = ("hour", "minute", "meridiem")


def _time_arg(s: str) -> time:
    parsed = parse_time_token(s)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"expected HH:MM or HHMM, got {s!r}")
    return parsed


def _interval_arg(s: str) -> int:
    try:
        return SelectionInterval.from_minutes(int(s)).value
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _edit_arg(s: str) -> Tuple[str, int]:
    wheel, _, raw_index = s.partition(":")
    if wheel not in WHEEL_NAMES or not raw_index.lstrip("-").isdigit():
        raise argparse.ArgumentTypeError(f"expected WHEEL:INDEX with WHEEL in {', '.join(WHEEL_NAMES)}, got {s!r}")
    return wheel, int(raw_index)


def _settings_for(args: argparse.Namespace) -> PickerSettings:
    settings = load_settings()
    if getattr(args, "interval", None) is not None:
        settings.interval = args.interval
    if getattr(args, "clock", None) is not None:
        settings.clock = args.clock
    return settings


def _build_picker(settings: PickerSettings, mode: SyncMode, emitted: List[datetime]) -> Tuple[TimePickerDataSource, List[MemoryWheel]]:
    wheels = [MemoryWheel(name) for name in WHEEL_NAMES]
    picker = TimePickerDataSource(
        *wheels,
        interval=settings.selection_interval(),
        probe=settings.convention(),
        clock=settings.wall_clock(),
        on_time_selected=emitted.append,
        sync_mode=mode,
    )
    return picker, wheels


def _cmd_options(args: argparse.Namespace) -> None:
    picker, _ = _build_picker(_settings_for(args), SyncMode.DISPLAY, [])
    options = picker.options
    print("Clock:", "24h" if options.uses_24_hour else "12h")
    print("Hours:", " ".join(options.hour_titles))
    print(f"Minutes ({options.block_size} per hour):", " ".join(options.minute_titles[: options.block_size]))
    if options.meridiem_labels is not None:
        print("Meridiem:", " ".join(options.meridiem_labels))


def _cmd_pick(args: argparse.Namespace) -> None:
    emitted: List[datetime] = []
    picker, wheels = _build_picker(_settings_for(args), SyncMode(args.mode), emitted)
    picker.setup(args.time)

    handlers = {
        "hour": picker.hour_picker_updated,
        "minute": picker.minute_picker_updated,
        "meridiem": picker.meridiem_picker_updated,
    }
    by_name = {w.name: w for w in wheels}
    for wheel, index in args.edit or []:
        before = len(emitted)
        # The user scrolls the wheel first; the picker hears about it after.
        by_name[wheel].set_selected_index(index)
        handlers[wheel](index)
        shown = emitted[-1].strftime("%H:%M") if len(emitted) > before else "(ignored)"
        print(f"{wheel} -> {index}: {shown}")

    for wheel in wheels:
        if wheel.name == "meridiem" and not wheel.visible:
            continue
        print(f"{wheel.name}: index={wheel.selected_index} title={wheel.selected_title}")
    print("Selected:", picker.selected_time().strftime("%H:%M"))


def _cmd_gui(args: argparse.Namespace) -> None:
    from timewheel.ui.app import main as gui_main  # Lazy import; needs a display and ttkbootstrap

    gui_main(_settings_for(args), args.time, SyncMode(args.mode))


def _add_picker_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--interval", type=_interval_arg, help="Minutes between options: 1, 5, 15 or 30")
    p.add_argument("--clock", choices=CLOCK_CHOICES, help="Clock convention (default: settings, then locale)")
    p.add_argument("--time", type=_time_arg, help="Initially selected time, HH:MM")
    p.add_argument("--mode", choices=[m.value for m in SyncMode], default=SyncMode.DISPLAY.value, help="How far one wheel's edit reconciles the others")


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(prog="timewheel")
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sp = ap.add_subparsers(dest="cmd")

    o = sp.add_parser("options", help="Print the wheel option lists")
    o.add_argument("--interval", type=_interval_arg, help="Minutes between options: 1, 5, 15 or 30")
    o.add_argument("--clock", choices=CLOCK_CHOICES, help="Clock convention (default: settings, then locale)")
    o.set_defaults(func=_cmd_options)

    p = sp.add_parser("pick", help="Run the picker headless and apply wheel edits")
    _add_picker_args(p)
    p.add_argument("--edit", action="append", type=_edit_arg, metavar="WHEEL:INDEX", help="Wheel edit, repeatable, applied in order")
    p.set_defaults(func=_cmd_pick)

    g = sp.add_parser("gui", help="Open the picker window")
    _add_picker_args(g)
    g.set_defaults(func=_cmd_gui)

    args = ap.parse_args(argv)
    if not hasattr(args, "func"):
        ap.print_help()
        return
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        LOGGER.warning("falling back to the C time locale: %s", exc)
    args.func(args)


if __name__ == "__main__":
    main()
