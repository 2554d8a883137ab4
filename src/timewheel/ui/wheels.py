from __future__ import annotations

import tkinter as tk
from typing import Callable, Dict, Optional, Sequence

import ttkbootstrap as ttk

# Character width of a wheel given the whole row.
_ROW_CHARS = 18


class ListboxWheel(ttk.Frame):
    """A single-selection Listbox standing in for a scroll wheel."""

    def __init__(
        self,
        master: tk.Misc,
        palette: Dict[str, str],
        on_change: Optional[Callable[[int], None]] = None,
        visible_rows: int = 5,
    ) -> None:
        super().__init__(master)
        self.on_change = on_change
        self._grid_args: Optional[dict] = None
        self.listbox = tk.Listbox(
            self,
            height=visible_rows,
            width=_ROW_CHARS // 3,
            exportselection=False,
            activestyle="none",
            justify=tk.CENTER,
            font=("Segoe UI", 16),
            background=palette["surface"],
            foreground=palette["text"],
            selectbackground=palette["select_bg"],
            selectforeground=palette["select_fg"],
            highlightthickness=0,
            borderwidth=0,
        )
        self.listbox.pack(fill=tk.BOTH, expand=True)
        # <<ListboxSelect>> only fires for user interaction, not selection_set.
        self.listbox.bind("<<ListboxSelect>>", self._on_select)

    def place_in_grid(self, **grid_args) -> None:
        self._grid_args = grid_args
        self.grid(**grid_args)

    def set_options(self, titles: Sequence[str]) -> None:
        self.listbox.delete(0, tk.END)
        for title in titles:
            self.listbox.insert(tk.END, title)
        if titles:
            self.set_selected_index(0)

    def set_selected_index(self, index: int) -> None:
        self.listbox.selection_clear(0, tk.END)
        self.listbox.selection_set(index)
        self.listbox.activate(index)
        self.listbox.see(index)

    def get_selected_index(self) -> int:
        selection = self.listbox.curselection()
        return int(selection[0]) if selection else 0

    def set_visible(self, visible: bool) -> None:
        if visible:
            if self._grid_args is not None:
                self.grid(**self._grid_args)
        else:
            self.grid_remove()

    def set_relative_width(self, fraction: float) -> None:
        self.listbox.configure(width=max(2, round(_ROW_CHARS * fraction)))

    def _on_select(self, _event: tk.Event) -> None:
        if self.on_change is not None:
            self.on_change(self.get_selected_index())
