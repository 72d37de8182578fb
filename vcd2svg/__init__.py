"""vcd2svg - render Value Change Dump traces as SVG timing diagrams."""

__version__ = "0.1.0"

from .data_model import (
    Time, TimeUnit, Timescale, VarDeclaration, ValueChange, VcdTree, VcdData
)
from .errors import (
    Vcd2SvgError, VcdParseError, TraceFileError, DeclarationError, TimelineError, RenderError
)
from .vcd_reader import read_vcd
from .timeline import build_timeline, process_vcd
from .svg_document import draw_svg
from .waveform import svg_from_tree, svg_from_bytes, svg_from_file, load_vcd, table_from_bytes
from .persistence import save_render_settings, load_render_settings
from .theme import ThemeName, get_theme
from .config import RENDERING, COLORS, RenderingConfig, ColorScheme

__all__ = [
    'Time', 'TimeUnit', 'Timescale', 'VarDeclaration', 'ValueChange', 'VcdTree', 'VcdData',
    'Vcd2SvgError', 'VcdParseError', 'TraceFileError', 'DeclarationError', 'TimelineError', 'RenderError',
    'read_vcd', 'build_timeline', 'process_vcd', 'draw_svg',
    'svg_from_tree', 'svg_from_bytes', 'svg_from_file', 'load_vcd', 'table_from_bytes',
    'save_render_settings', 'load_render_settings', 'ThemeName', 'get_theme',
    'RENDERING', 'COLORS', 'RenderingConfig', 'ColorScheme'
]
