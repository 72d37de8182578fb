"""Test persistence functionality for saving and loading render settings."""

from dataclasses import replace

import pytest
import yaml

from vcd2svg import load_render_settings, save_render_settings
from vcd2svg.config import COLORS, RENDERING
from vcd2svg.theme import ThemeName, THEMES


def test_save_load_roundtrip(tmp_path):
    """Saved settings come back field for field."""
    rendering = replace(RENDERING, COLUMN_WIDTH=64, SHOW_GRID_LINES=False)
    colors = replace(COLORS, BUS_TEXT="#123456")
    path = tmp_path / "settings.yaml"

    save_render_settings(path, rendering, colors)
    loaded_rendering, loaded_colors = load_render_settings(path)

    assert loaded_rendering == rendering
    assert loaded_colors == colors


def test_saved_file_is_plain_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    save_render_settings(path)

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert set(data) == {"rendering", "colors"}
    assert data["rendering"]["ROW_HEIGHT"] == RENDERING.ROW_HEIGHT
    assert data["colors"]["BACKGROUND"] == COLORS.BACKGROUND


def test_theme_with_overrides(tmp_path):
    """The theme picks the palette; the colors section overrides single fields."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "theme: light\n"
        "rendering:\n"
        "  ROW_HEIGHT: 24\n"
        "colors:\n"
        "  BUS_TEXT: '#ff00ff'\n",
        encoding="utf-8",
    )

    rendering, colors = load_render_settings(path)

    assert rendering == replace(RENDERING, ROW_HEIGHT=24)
    assert colors == replace(THEMES[ThemeName.LIGHT], BUS_TEXT="#ff00ff")


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")
    assert load_render_settings(path) == (RENDERING, COLORS)


@pytest.mark.parametrize("content, message", [
    ("layout:\n  ROW_HEIGHT: 24\n", "Unknown settings sections"),
    ("rendering:\n  ROW_HIGHT: 24\n", "Unknown rendering settings: ROW_HIGHT"),
    ("colors:\n  - '#000000'\n", "must be a mapping"),
    ("- just\n- a list\n", "must contain a mapping"),
    ("theme: Solarized\n", "Unknown theme"),
])
def test_invalid_settings(tmp_path, content, message):
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_render_settings(path)


@pytest.mark.parametrize("content, message", [
    ("rendering:\n  COLUMN_WIDTH: '60'\n", "COLUMN_WIDTH: expected int"),
    ("rendering:\n  ROW_HEIGHT: true\n", "ROW_HEIGHT: expected int"),
    ("rendering:\n  SHOW_GRID_LINES: 1\n", "SHOW_GRID_LINES: expected bool"),
    ("rendering:\n  STROKE_WIDTH: thick\n", "STROKE_WIDTH: expected float"),
    ("colors:\n  TEXT: 255\n", "TEXT: expected str"),
])
def test_wrong_value_types_rejected(tmp_path, content, message):
    """A value of the wrong type is reported on load, not when drawing."""
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_render_settings(path)


def test_int_accepted_for_float_setting(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("rendering:\n  STROKE_WIDTH: 2\n", encoding="utf-8")
    rendering, _ = load_render_settings(path)
    assert rendering.STROKE_WIDTH == 2
