"""Build the SVG timing diagram for a Normalized Table.

Layout
- A ruler of RULER_HEIGHT pixels on top, then one row of ROW_HEIGHT pixels
  per signal in declaration order. Odd rows get the alternate background.
- A label column on the left, wide enough for the longest signal name.
- One column of COLUMN_WIDTH pixels per recorded time, in ascending time
  order. Column positions depend only on the column index, so the image grows
  with the number of recorded times, not with the simulated duration.

Nothing time- or address-dependent goes into the document, and every loop
runs over a list (signals, sorted times), so the same table always produces
the same bytes.
"""

import io
import logging

import svgwrite

from .config import COLORS, RENDERING, ColorScheme, RenderingConfig
from .data_model import VcdData
from .errors import RenderError
from .signal_renderer import RenderParams, draw_bus_signal, draw_digital_signal, estimate_text_width
from .signal_sampling import sample_signal
from .time_grid_renderer import TimeGridRenderer

logger = logging.getLogger(__name__)


def _stylesheet(rendering: RenderingConfig, colors: ColorScheme) -> str:
    stroke = rendering.STROKE_WIDTH
    return f"""
text {{ font-family: {rendering.FONT_FAMILY}; }}
.signal-name {{ fill: {colors.TEXT}; font-size: {rendering.FONT_SIZE}px; dominant-baseline: central; }}
.tick-label {{ fill: {colors.TEXT_MUTED}; font-size: {rendering.FONT_SIZE_SMALL}px; }}
.tick {{ stroke: {colors.RULER_LINE}; stroke-width: 1; }}
.grid {{ stroke: {colors.GRID}; stroke-width: 0.5; }}
.wire, .edge {{ stroke: {colors.DEFAULT_SIGNAL}; stroke-width: {stroke}; fill: none; }}
.wire.undefined {{ stroke: {colors.UNDEFINED_SIGNAL}; stroke-dasharray: 4 2; }}
.wire.highz {{ stroke: {colors.HIGH_IMPEDANCE_SIGNAL}; stroke-dasharray: 1 2; }}
.bus {{ stroke: {colors.DEFAULT_SIGNAL}; stroke-width: {stroke}; fill: none; }}
.bus.undefined {{ stroke: {colors.UNDEFINED_SIGNAL}; fill: {colors.UNDEFINED_FILL}; }}
.bus.highz {{ stroke: {colors.HIGH_IMPEDANCE_SIGNAL}; stroke-dasharray: 1 2; }}
.bus-text {{ fill: {colors.BUS_TEXT}; font-size: {rendering.FONT_SIZE_SMALL}px; text-anchor: middle; dominant-baseline: central; }}
"""


def _check_table(table: VcdData) -> None:
    """Every snapshot must cover exactly the declared signals."""
    expected = set(table.signals)
    for time in table.times():
        names = set(table.sim[time])
        if names != expected:
            missing = sorted(expected - names)
            unknown = sorted(names - expected)
            raise RenderError(
                f"Snapshot at time {time} does not match the signal list "
                f"(missing: {missing}, undeclared: {unknown})"
            )


def label_column_width(table: VcdData, rendering: RenderingConfig = RENDERING) -> int:
    """Width of the signal name column."""
    widest = max((estimate_text_width(name, rendering.FONT_SIZE, rendering) for name in table.signals),
                 default=0)
    return max(rendering.MIN_LABEL_WIDTH, int(widest) + 2 * rendering.LABEL_PADDING)


def draw_svg(table: VcdData, rendering: RenderingConfig = RENDERING, colors: ColorScheme = COLORS) -> bytes:
    """Render the table as a complete SVG document (UTF-8 bytes)."""
    _check_table(table)

    times = table.times()
    label_width = label_column_width(table, rendering)
    waveform_width = max(len(times), 1) * rendering.COLUMN_WIDTH
    width = label_width + waveform_width + rendering.RIGHT_MARGIN
    height = rendering.RULER_HEIGHT + max(len(table.signals), 1) * rendering.ROW_HEIGHT

    dwg = svgwrite.Drawing(size=(width, height), profile="full", debug=False)
    dwg.viewbox(0, 0, width, height)
    dwg.embed_stylesheet(_stylesheet(rendering, colors))
    dwg.add(dwg.rect(insert=(0, 0), size=(width, height), fill=colors.BACKGROUND))

    params = RenderParams(
        x_origin=label_width,
        column_width=rendering.COLUMN_WIDTH,
        row_height=rendering.ROW_HEIGHT,
        rendering=rendering,
    )

    ruler = dwg.g(class_="ruler")
    ruler.add(dwg.rect(insert=(0, 0), size=(width, rendering.RULER_HEIGHT), fill=colors.HEADER_BACKGROUND))
    TimeGridRenderer(rendering, table.timescale).render(dwg, ruler, times, params, grid_bottom=height)

    rows = dwg.g(class_="rows")
    tracks = dwg.g(class_="tracks")
    for index, name in enumerate(table.signals):
        y = rendering.RULER_HEIGHT + index * rendering.ROW_HEIGHT
        if index % 2 == 1:
            rows.add(dwg.rect(insert=(0, y), size=(width, rendering.ROW_HEIGHT), fill=colors.ALTERNATE_ROW))
        track = dwg.g(class_="track")
        track.add(dwg.text(name, insert=(rendering.LABEL_PADDING, y + rendering.ROW_HEIGHT / 2),
                           class_="signal-name"))

        drawing_data = sample_signal(table, name, times)
        if drawing_data.is_bus:
            draw_bus_signal(dwg, track, drawing_data, y, params)
        else:
            draw_digital_signal(dwg, track, drawing_data, y, params)
        tracks.add(track)

    # Paint order: row backgrounds, ruler and grid, then the waves
    dwg.add(rows)
    dwg.add(ruler)
    dwg.add(tracks)

    buffer = io.StringIO()
    dwg.write(buffer)
    svg = buffer.getvalue().encode("utf-8")
    logger.debug("Rendered %d signals over %d columns (%d bytes)", len(table.signals), len(times), len(svg))
    return svg
