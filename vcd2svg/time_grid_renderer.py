"""Time ruler and grid rendering.

Columns are evenly spaced whatever the time between them, so the ruler
labels columns rather than a continuous time axis. Labels are thinned out to
every n-th column when they would otherwise overlap.
"""

import math
from typing import List, Optional, Sequence, TypedDict

from svgwrite import Drawing
from svgwrite.container import Group

from .config import RENDERING, RenderingConfig
from .data_model import Time, Timescale
from .signal_renderer import RenderParams, column_to_x, estimate_text_width


class TickInfo(TypedDict):
    """Information about a single tick position."""
    column: int        # Column index of the recorded time
    time_value: Time   # Time in Timescale units
    label: str         # Formatted label for this tick


class TimeGridRenderer:
    """Renderer for the time ruler and the vertical grid lines."""

    def __init__(self,
                 rendering: Optional[RenderingConfig] = None,
                 timescale: Optional[Timescale] = None) -> None:
        self._rendering: RenderingConfig = rendering or RENDERING
        self._timescale: Timescale = timescale or Timescale()

    def format_time_label(self, time: Time) -> str:
        """Label for a time in Timescale units, e.g. ``20ns`` for #2 at 10 ns."""
        return f"{time * self._timescale.factor}{self._timescale.unit.value}"

    def label_stride(self, times: Sequence[Time], column_width: int) -> int:
        """Number of columns between two labelled ticks."""
        if not times or column_width <= 0:
            return 1
        # The last time has the longest label
        label = self.format_time_label(times[-1])
        label_width = estimate_text_width(label, self._rendering.FONT_SIZE_SMALL, self._rendering)
        label_width += self._rendering.LABEL_PADDING
        available = column_width * self._rendering.TICK_DENSITY
        return max(1, math.ceil(label_width / available))

    def calculate_ticks(self, times: Sequence[Time], column_width: int) -> List[TickInfo]:
        """Pick the columns that get a labelled tick."""
        stride = self.label_stride(times, column_width)
        return [
            TickInfo(column=column, time_value=times[column], label=self.format_time_label(times[column]))
            for column in range(0, len(times), stride)
        ]

    def render(self, dwg: Drawing, parent: Group, times: Sequence[Time],
               params: RenderParams, grid_bottom: float) -> None:
        """Draw tick marks, labels and (optionally) grid lines down to grid_bottom."""
        ruler_height = self._rendering.RULER_HEIGHT
        tick_top = ruler_height - self._rendering.TICK_HEIGHT

        for tick in self.calculate_ticks(times, params['column_width']):
            x = column_to_x(tick['column'], params)
            parent.add(dwg.line((x, tick_top), (x, ruler_height), class_="tick"))
            parent.add(dwg.text(tick['label'], insert=(x + 2, tick_top - 3), class_="tick-label"))
            if self._rendering.SHOW_GRID_LINES:
                parent.add(dwg.line((x, ruler_height), (x, grid_bottom), class_="grid"))
