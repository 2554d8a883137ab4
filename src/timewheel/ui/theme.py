"""Palettes for the picker window."""
from __future__ import annotations

from typing import Dict

import ttkbootstrap as ttk

LIGHT = {
    "bg": "#FFFFFF",
    "surface": "#F3F4F6",
    "text": "#111827",
    "muted": "#6B7280",
    "select_bg": "#2563EB",
    "select_fg": "#FFFFFF",
}

DARK = {
    "bg": "#121212",
    "surface": "#1E1E1E",
    "text": "#E6E6E6",
    "muted": "#9CA3AF",
    "select_bg": "#D32F2F",
    "select_fg": "#FFFFFF",
}

BOOTSTRAP_THEMES = {"light": "flatly", "dark": "darkly"}


def _windows_pref_dark() -> bool:
    try:
        import winreg  # type: ignore

        personalize = r"Software\Microsoft\Windows\CurrentVersion\Themes\Personalize"
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, personalize) as key:  # type: ignore[attr-defined]
            value, _ = winreg.QueryValueEx(key, "AppsUseLightTheme")
            return value == 0
    except (ImportError, OSError):
        return False


def resolve_theme_name(name: str) -> str:
    if name in ("light", "dark"):
        return name
    return "dark" if _windows_pref_dark() else "light"


def select_palette(name: str) -> Dict[str, str]:
    return DARK if resolve_theme_name(name) == "dark" else LIGHT


def apply_theme(window: ttk.Window, palette: Dict[str, str]) -> None:
    style = ttk.Style()
    style.configure("TFrame", background=palette["bg"])
    style.configure("TLabel", background=palette["bg"], foreground=palette["text"], font=("Segoe UI", 11))
    style.configure("Time.TLabel", font=("Segoe UI", 28))
    window.configure(background=palette["bg"])
