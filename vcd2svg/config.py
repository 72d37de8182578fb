"""Centralized configuration for vcd2svg.

This module contains the layout constants and colors used by the SVG
renderer. Both dataclasses are frozen; derive variants with
``dataclasses.replace`` or load them from YAML (see persistence.py).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderingConfig:
    """Configuration for signal rendering."""
    ROW_HEIGHT: int = 30
    SIGNAL_MARGIN_TOP: int = 6
    SIGNAL_MARGIN_BOTTOM: int = 6
    COLUMN_WIDTH: int = 40  # Pixels per recorded time
    BUS_TRANSITION_MAX_WIDTH: int = 4  # Half width of the bus crossing glyph
    BUS_TEXT_PADDING: int = 4
    STROKE_WIDTH: float = 1.5

    # Font settings
    FONT_FAMILY: str = "monospace"
    FONT_SIZE: int = 12
    FONT_SIZE_SMALL: int = 10
    CHAR_WIDTH_FACTOR: float = 0.6  # Advance of one monospace glyph per font pixel

    # Signal name column
    LABEL_PADDING: int = 10
    MIN_LABEL_WIDTH: int = 60

    # Time ruler
    RULER_HEIGHT: int = 24
    TICK_HEIGHT: int = 5
    TICK_DENSITY: float = 0.8  # Fraction of the width labels may occupy
    SHOW_GRID_LINES: bool = True
    RIGHT_MARGIN: int = 10


@dataclass(frozen=True)
class ColorScheme:
    """Color scheme for the rendered diagram."""
    # Backgrounds
    BACKGROUND: str = "#1e1e1e"
    ALTERNATE_ROW: str = "#2d2d30"
    HEADER_BACKGROUND: str = "#2d2d30"

    # Lines
    GRID: str = "#3e3e42"
    RULER_LINE: str = "#808080"

    # Text
    TEXT: str = "#cccccc"
    TEXT_MUTED: str = "#808080"
    BUS_TEXT: str = "#ffff00"

    # Signals
    DEFAULT_SIGNAL: str = "#00e676"
    UNDEFINED_SIGNAL: str = "#ff5252"
    HIGH_IMPEDANCE_SIGNAL: str = "#ffd740"
    UNDEFINED_FILL: str = "#5c1f1f"


# Global instances for easy access
RENDERING = RenderingConfig()
COLORS = ColorScheme()
