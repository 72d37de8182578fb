"""Waveform signal renderer.

Purpose
- Provide the drawing routines for the two signal kinds of a VCD trace:
  scalar wires (step lines) and buses (boxes with crossing transitions).
- Keep the document builder thin: it assembles runs and row geometry, this
  module turns them into svgwrite elements.

Key ideas
- X axis is the column index of a recorded time, mapped linearly to pixels by
  column_to_x. A run covers [start_column, end_column) so the last value of a
  trace extends one column to the right.
- Y axis is the row allocated to the signal. calculate_signal_bounds returns
  top/bottom/middle Y coordinates inside that row with small margins.
- Every run carries a <title> with its literal, so values whose caption does
  not fit are still present in the document (and show up as tooltips).

There are no font metrics outside a GUI toolkit; text width is estimated from
the glyph count of a monospace font.
"""

from typing import List, Tuple, TypedDict

from svgwrite import Drawing
from svgwrite.container import Group

from .config import RENDERING, RenderingConfig
from .signal_sampling import SignalDrawingData, SignalRun, ValueKind

Point = Tuple[float, float]


class RenderParams(TypedDict):
    x_origin: float       # X of column 0
    column_width: int
    row_height: int
    rendering: RenderingConfig


_KIND_CLASSES = {
    ValueKind.NORMAL: "",
    ValueKind.UNDEFINED: " undefined",
    ValueKind.HIGH_IMPEDANCE: " highz",
}


def calculate_signal_bounds(y: float, row_height: int, margin_top: int = RENDERING.SIGNAL_MARGIN_TOP,
                            margin_bottom: int = RENDERING.SIGNAL_MARGIN_BOTTOM) -> Tuple[float, float, float]:
    """Compute vertical drawing band inside a row.

    Args:
        y: Top Y coordinate of the row in pixels.
        row_height: Row height in pixels.
        margin_top: Top inner margin.
        margin_bottom: Bottom inner margin.

    Returns:
        (y_top, y_bottom, y_middle): Y coordinates delimiting usable area and its center.
    """
    y_top = y + margin_top
    y_bottom = y + row_height - margin_bottom
    y_middle = y + row_height / 2
    return y_top, y_bottom, y_middle


def column_to_x(column: int, params: RenderParams) -> float:
    return params['x_origin'] + column * params['column_width']


def estimate_text_width(text: str, font_size: int, rendering: RenderingConfig = RENDERING) -> float:
    """Width of text set in the monospace font, in pixels."""
    return len(text) * font_size * rendering.CHAR_WIDTH_FACTOR


def _with_title(element, run: SignalRun):
    if run.value is not None:
        element.set_desc(title=run.value)
    return element


def _level_y(run: SignalRun, y_high: float, y_low: float, y_middle: float) -> float:
    if run.value_kind is ValueKind.NORMAL:
        if run.value == "1":
            return y_high
        if run.value == "0":
            return y_low
    return y_middle


def draw_digital_signal(dwg: Drawing, group: Group, drawing_data: SignalDrawingData,
                        y: float, params: RenderParams) -> None:
    """Render a scalar waveform as step lines.

    Each run is a horizontal stroke at y_high (1), y_low (0) or y_middle
    (x, z, never assigned). Unknown and high impedance strokes get their own
    classes so they are styled apart from 0/1. A vertical edge joins two runs
    whose levels differ.
    """
    rendering = params['rendering']
    y_high, y_low, y_middle = calculate_signal_bounds(
        y, params['row_height'], rendering.SIGNAL_MARGIN_TOP, rendering.SIGNAL_MARGIN_BOTTOM
    )

    previous_y = None
    for run in drawing_data.runs:
        x_start = column_to_x(run.start_column, params)
        x_end = column_to_x(run.end_column, params)
        current_y = _level_y(run, y_high, y_low, y_middle)

        if previous_y is not None and previous_y != current_y:
            group.add(dwg.line((x_start, previous_y), (x_start, current_y), class_="edge"))

        line = dwg.line((x_start, current_y), (x_end, current_y),
                        class_="wire" + _KIND_CLASSES[run.value_kind])
        group.add(_with_title(line, run))
        previous_y = current_y


def _bus_outline(x_start: float, x_end: float, y_top: float, y_bottom: float, y_middle: float,
                 left_slope: float, right_slope: float) -> List[Point]:
    """Hexagon for one bus run; a zero slope gives a vertical edge on that side."""
    points: List[Point] = []
    if left_slope:
        points.append((x_start, y_middle))
        points.append((x_start + left_slope, y_top))
    else:
        points.append((x_start, y_bottom))
        points.append((x_start, y_top))
    if right_slope:
        points.append((x_end - right_slope, y_top))
        points.append((x_end, y_middle))
        points.append((x_end - right_slope, y_bottom))
    else:
        points.append((x_end, y_top))
        points.append((x_end, y_bottom))
    if left_slope:
        points.append((x_start + left_slope, y_bottom))
    return points


def draw_bus_signal(dwg: Drawing, group: Group, drawing_data: SignalDrawingData,
                    y: float, params: RenderParams) -> None:
    """Render a multi-bit bus.

    Logic overview:
    - Each run is a flat-topped box; where two runs meet, the sloped ends of
      both boxes cross and form the "><" transition glyph.
    - The outer ends of the first and last run are vertical.
    - The caption is the literal exactly as recorded (``b1010``), centered in
      the run. It is left out when the run is narrower than the text.
    """
    rendering = params['rendering']
    y_top, y_bottom, y_middle = calculate_signal_bounds(
        y, params['row_height'], rendering.SIGNAL_MARGIN_TOP, rendering.SIGNAL_MARGIN_BOTTOM
    )
    runs = drawing_data.runs
    widths = [run.columns * params['column_width'] for run in runs]
    # One slope per boundary, so both halves of a crossing meet on the middle line
    slopes = [min(rendering.BUS_TRANSITION_MAX_WIDTH, left / 2, right / 2)
              for left, right in zip(widths, widths[1:])]

    for i, run in enumerate(runs):
        x_start = column_to_x(run.start_column, params)
        x_end = column_to_x(run.end_column, params)
        run_width = x_end - x_start

        left_slope = slopes[i - 1] if i > 0 else 0
        right_slope = slopes[i] if i < len(slopes) else 0

        outline = dwg.polygon(
            _bus_outline(x_start, x_end, y_top, y_bottom, y_middle, left_slope, right_slope),
            class_="bus" + _KIND_CLASSES[run.value_kind],
        )
        group.add(_with_title(outline, run))

        if run.value is None:
            continue
        interior_width = run_width - left_slope - right_slope - 2 * rendering.BUS_TEXT_PADDING
        if estimate_text_width(run.value, rendering.FONT_SIZE_SMALL, rendering) <= interior_width:
            group.add(dwg.text(run.value, insert=(x_start + run_width / 2, y_middle),
                               class_="bus-text"))
