"""Predefined color palettes for rendered diagrams."""

from enum import Enum
from typing import Dict

from .config import ColorScheme


class ThemeName(Enum):
    """Available theme names."""
    DEFAULT = "Default"
    LIGHT = "Light"
    DRACULA = "Dracula"


# Theme palette definitions
THEMES: Dict[ThemeName, ColorScheme] = {
    ThemeName.DEFAULT: ColorScheme(),

    ThemeName.LIGHT: ColorScheme(  # Printable, for documentation
        BACKGROUND="#ffffff",
        ALTERNATE_ROW="#f3f3f3",
        HEADER_BACKGROUND="#e8e8e8",
        GRID="#dddddd",
        RULER_LINE="#555555",
        TEXT="#222222",
        TEXT_MUTED="#777777",
        BUS_TEXT="#000000",
        DEFAULT_SIGNAL="#1565c0",
        UNDEFINED_SIGNAL="#c62828",
        HIGH_IMPEDANCE_SIGNAL="#ef6c00",
        UNDEFINED_FILL="#ffcdd2",
    ),

    ThemeName.DRACULA: ColorScheme(
        BACKGROUND="#282A36",
        ALTERNATE_ROW="#2F3241",
        HEADER_BACKGROUND="#21222C",
        GRID="#44475A",
        RULER_LINE="#6272A4",
        TEXT="#F8F8F2",
        TEXT_MUTED="#6272A4",
        BUS_TEXT="#F1FA8C",
        DEFAULT_SIGNAL="#50FA7B",
        UNDEFINED_SIGNAL="#FF5555",
        HIGH_IMPEDANCE_SIGNAL="#FFB86C",
        UNDEFINED_FILL="#5A2A36",
    ),
}


def get_theme(name: str) -> ColorScheme:
    """Look up a palette by its display name (case-insensitive)."""
    for theme in ThemeName:
        if theme.value.lower() == name.strip().lower():
            return THEMES[theme]
    raise ValueError(f"Unknown theme: {name}")
