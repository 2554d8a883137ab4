"""Tkinter window hosting the three time wheels."""
from __future__ import annotations

import tkinter as tk
from datetime import datetime
from typing import Optional

import ttkbootstrap as ttk

from timewheel.config import PickerSettings
from timewheel.core.engine import SyncMode, TimePickerDataSource
from timewheel.core.timeutil import TimeLike
from timewheel.ui.theme import BOOTSTRAP_THEMES, apply_theme, resolve_theme_name, select_palette
from timewheel.ui.wheels import ListboxWheel
from timewheel.version import APP_VERSION


class TimeWheelApp(ttk.Window):
    def __init__(
        self,
        settings: PickerSettings,
        initial_time: Optional[TimeLike] = None,
        sync_mode: SyncMode = SyncMode.DISPLAY,
    ) -> None:
        theme = resolve_theme_name(settings.theme)
        super().__init__(themename=BOOTSTRAP_THEMES[theme])
        self.title(f"TimeWheel {APP_VERSION}")
        self.palette = select_palette(theme)
        apply_theme(self, self.palette)
        self.time_var = tk.StringVar(value="--:--")
        self._build_layout()

        self.picker = TimePickerDataSource(
            self.hour_wheel,
            self.minute_wheel,
            self.meridiem_wheel,
            settings.selection_interval(),
            probe=settings.convention(),
            clock=settings.wall_clock(),
            on_time_selected=self._show_time,
            sync_mode=sync_mode,
        )
        self.hour_wheel.on_change = self.picker.hour_picker_updated
        self.minute_wheel.on_change = self.picker.minute_picker_updated
        self.meridiem_wheel.on_change = self.picker.meridiem_picker_updated

        self.picker.setup()
        self.picker.select_time(initial_time or self.picker.clock.now())

    def _build_layout(self) -> None:
        body = ttk.Frame(self, padding=20)
        body.pack(fill=tk.BOTH, expand=True)
        wheels = ttk.Frame(body)
        wheels.pack(fill=tk.BOTH, expand=True)
        self.hour_wheel = ListboxWheel(wheels, self.palette)
        self.minute_wheel = ListboxWheel(wheels, self.palette)
        self.meridiem_wheel = ListboxWheel(wheels, self.palette, visible_rows=2)
        for column, wheel in enumerate((self.hour_wheel, self.minute_wheel, self.meridiem_wheel)):
            wheels.columnconfigure(column, weight=1)
            wheel.place_in_grid(row=0, column=column, padx=4, sticky="nsew")

        ttk.Label(body, textvariable=self.time_var, style="Time.TLabel", anchor=tk.CENTER).pack(fill=tk.X, pady=(16, 0))

    def _show_time(self, selected: datetime) -> None:
        if self.picker.uses_24_hour:
            self.time_var.set(selected.strftime("%H:%M"))
        else:
            labels = self.picker.options.meridiem_labels or ("AM", "PM")
            hour = selected.hour % 12 or 12
            self.time_var.set(f"{hour}:{selected.minute:02d} {labels[0 if selected.hour < 12 else 1]}")


def main(
    settings: Optional[PickerSettings] = None,
    initial_time: Optional[TimeLike] = None,
    sync_mode: SyncMode = SyncMode.DISPLAY,
) -> None:
    app = TimeWheelApp(settings or PickerSettings(), initial_time, sync_mode)
    app.mainloop()


if __name__ == "__main__":  # pragma: no cover
    main()
