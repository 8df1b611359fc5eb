"""Theme and style constants for placement diagrams."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a placement diagram."""

    name: str
    background_color: str
    stage_stroke: str
    safe_area_fill: str
    safe_area_stroke: str
    pointer_color: str
    clearance_stroke: str
    candidate_stroke: str
    popup_fill: str
    popup_stroke: str
    overflow_stroke: str
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    stroke_width: float = 1.5
    pointer_radius: float = 4.0
