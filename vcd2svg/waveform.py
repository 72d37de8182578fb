"""Entry points: VCD in, SVG out.

Each call builds its own tree and table and shares nothing with other calls,
so the functions can be used from several threads at once.
"""

import logging
import pathlib
from typing import Union

from .config import COLORS, RENDERING, ColorScheme, RenderingConfig
from .data_model import VcdData, VcdTree
from .errors import TraceFileError
from .svg_document import draw_svg
from .timeline import build_timeline
from .vcd_reader import read_vcd

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.Path]


def table_from_bytes(data: bytes) -> VcdData:
    """Parse VCD bytes into the Normalized Table."""
    return build_timeline(read_vcd(data))


def _read_trace(path: PathLike) -> bytes:
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as exc:
        raise TraceFileError(exc.errno, exc.strerror, str(path)) from exc


def load_vcd(path: PathLike) -> VcdData:
    """Read a VCD file into the Normalized Table."""
    return table_from_bytes(_read_trace(path))


def svg_from_tree(tree: VcdTree, rendering: RenderingConfig = RENDERING,
                  colors: ColorScheme = COLORS) -> bytes:
    """Render an already parsed trace."""
    return draw_svg(build_timeline(tree), rendering, colors)


def svg_from_bytes(data: bytes, rendering: RenderingConfig = RENDERING,
                   colors: ColorScheme = COLORS) -> bytes:
    """Render VCD bytes.

    Raises:
        VcdParseError: The bytes are not a valid VCD trace.
    """
    return svg_from_tree(read_vcd(data), rendering, colors)


def svg_from_file(path: PathLike, rendering: RenderingConfig = RENDERING,
                  colors: ColorScheme = COLORS) -> bytes:
    """Render a VCD file.

    Raises:
        TraceFileError: The file cannot be opened or read.
        VcdParseError: The file content is not a valid VCD trace.
    """
    logger.info("Rendering %s", path)
    return svg_from_bytes(_read_trace(path), rendering, colors)
