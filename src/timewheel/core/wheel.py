from __future__ import annotations

from typing import List, Optional, Protocol, Sequence


class Wheel(Protocol):
    """What the picker needs from a single scrollable list widget."""

    def set_options(self, titles: Sequence[str]) -> None: ...

    def set_selected_index(self, index: int) -> None: ...

    def get_selected_index(self) -> int: ...

    def set_visible(self, visible: bool) -> None: ...

    def set_relative_width(self, fraction: float) -> None: ...


class MemoryWheel:
    """Headless wheel used by the command line and tests."""

    def __init__(self, name: str = "wheel") -> None:
        self.name = name
        self.titles: List[str] = []
        self.selected_index = 0
        self.visible = True
        self.relative_width: Optional[float] = None
        self.writes: List[int] = []

    def set_options(self, titles: Sequence[str]) -> None:
        self.titles = list(titles)
        self.selected_index = 0

    def set_selected_index(self, index: int) -> None:
        self.selected_index = index
        self.writes.append(index)

    def get_selected_index(self) -> int:
        return self.selected_index

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_relative_width(self, fraction: float) -> None:
        self.relative_width = fraction

    @property
    def selected_title(self) -> Optional[str]:
        if 0 <= self.selected_index < len(self.titles):
            return self.titles[self.selected_index]
        return None

    def __repr__(self) -> str:
        return f"MemoryWheel({self.name!r}, index={self.selected_index}, title={self.selected_title!r})"
