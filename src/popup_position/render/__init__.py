"""Diagnostic SVG rendering."""

from popup_position.render.svg import render_svg

__all__ = ["render_svg"]
