"""Persistence of render settings as YAML.

A settings file looks like::

    theme: Light
    rendering:
      COLUMN_WIDTH: 60
      ROW_HEIGHT: 24
    colors:
      BUS_TEXT: "#000000"

``theme`` picks the base palette; the other two sections override single
fields of RenderingConfig and ColorScheme.
"""

import pathlib
from dataclasses import asdict, fields, replace
from typing import Any, Dict, Optional, Tuple, TypeVar, Union

import yaml

from .config import COLORS, RENDERING, ColorScheme, RenderingConfig
from .theme import get_theme

_Config = TypeVar("_Config", RenderingConfig, ColorScheme)


def _apply_overrides(base: _Config, overrides: Optional[Dict[str, Any]], section: str) -> _Config:
    if not overrides:
        return base
    if not isinstance(overrides, dict):
        raise ValueError(f"'{section}' must be a mapping")
    known = {f.name for f in fields(base)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown {section} settings: {', '.join(unknown)}")
    for name, value in overrides.items():
        expected = type(getattr(base, name))
        if not _matches_type(value, expected):
            raise ValueError(
                f"Invalid {section} setting {name}: expected {expected.__name__}, got {value!r}"
            )
    return replace(base, **overrides)


def _matches_type(value: Any, expected: type) -> bool:
    # bool is an int subclass, but YAML true/false must not pass as a size
    if isinstance(value, bool) or expected is bool:
        return isinstance(value, bool) and expected is bool
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def save_render_settings(path: Union[str, pathlib.Path],
                         rendering: RenderingConfig = RENDERING,
                         colors: ColorScheme = COLORS) -> None:
    """Write the full rendering and color settings to a YAML file."""
    data: Dict[str, Any] = {
        'rendering': asdict(rendering),
        'colors': asdict(colors),
    }
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def load_render_settings(path: Union[str, pathlib.Path]) -> Tuple[RenderingConfig, ColorScheme]:
    """Read render settings from a YAML file.

    Raises:
        ValueError: The file has unknown keys or a bad theme name.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    unknown = sorted(set(data) - {'theme', 'rendering', 'colors'})
    if unknown:
        raise ValueError(f"Unknown settings sections: {', '.join(unknown)}")

    colors = get_theme(str(data['theme'])) if data.get('theme') else COLORS
    rendering = _apply_overrides(RENDERING, data.get('rendering'), 'rendering')
    colors = _apply_overrides(colors, data.get('colors'), 'colors')
    return rendering, colors
