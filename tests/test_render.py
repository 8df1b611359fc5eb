"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET
from pathlib import Path

from popup_position.parser.scenario import parse_scenario
from popup_position.render.svg import render_svg
from popup_position.themes import DARK_THEME, LIGHT_THEME

FIXTURES = Path(__file__).parent / "fixtures"


def _render(name="below.json", theme=DARK_THEME):
    scenario = parse_scenario((FIXTURES / name).read_text())
    return render_svg(scenario, theme)


def test_render_produces_valid_svg():
    svg = _render()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_contains_title():
    assert "Cursor in the middle of the page" in _render()


def test_render_labels_candidates():
    svg = _render()
    for side in ("above", "below", "left", "right"):
        assert side in svg


def test_render_dark_theme_background():
    assert DARK_THEME.background_color in _render()


def test_render_light_theme_colors():
    svg = _render(theme=LIGHT_THEME)
    assert LIGHT_THEME.popup_stroke in svg


def test_render_clamped_popup_shows_overflow():
    svg = _render("best_area.json")
    # Width clamp on the left candidate; the chosen right popup is unclamped
    assert "right" in svg
    ET.fromstring(svg)


def test_render_fallback():
    svg = _render("no_room.json")
    assert "fallback" in svg
    ET.fromstring(svg)


def test_render_fixed_mode():
    svg = _render("bottom_right.json")
    assert "fixed" in svg
    ET.fromstring(svg)


def test_render_size_includes_padding():
    root = ET.fromstring(_render("no_room.json"))
    # 40px stage plus 40px padding on each side, no title
    assert root.get("width") == "120"
