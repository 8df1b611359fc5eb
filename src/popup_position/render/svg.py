"""SVG diagrams of placement decisions using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from popup_position.layout.engine import TIER_FIXED, Explanation
from popup_position.model import PopupPosition, PopupSize
from popup_position.parser.scenario import Scenario
from popup_position.render.constants import (
    CANDIDATE_DASH,
    CANVAS_PADDING,
    LABEL_INSET,
    OVERFLOW_DASH,
    STAGE_CORNER_RADIUS,
    TITLE_HEIGHT,
)
from popup_position.render.style import Theme


def render_svg(
    scenario: Scenario,
    theme: Theme,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a scenario's stage, candidates and chosen popup to an SVG string.

    Everything is drawn in viewport coordinates, offset by the canvas padding.
    """
    explanation = scenario.explain()
    stage = explanation.stage

    top = padding + (TITLE_HEIGHT if scenario.title else 0.0)
    svg_width = int(stage.width + padding * 2)
    svg_height = int(stage.height + top + padding)

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if scenario.title:
        d.append(draw.Text(
            scenario.title,
            theme.title_font_size,
            padding, padding,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    group = draw.Group(transform=f"translate({padding},{top})")
    _render_stage(group, explanation, theme)
    _render_candidates(group, explanation, scenario.popup_size, theme)
    _render_pointer(group, scenario, theme)
    _render_popup(group, explanation, scenario, theme)
    d.append(group)

    return d.as_svg()


def _render_stage(group: draw.Group, explanation: Explanation, theme: Theme) -> None:
    """Draw the stage outline and the safe area inside it."""
    stage = explanation.stage
    bounds = explanation.bounds

    group.append(draw.Rectangle(
        0, 0, stage.width, stage.height,
        rx=STAGE_CORNER_RADIUS, ry=STAGE_CORNER_RADIUS,
        fill="none",
        stroke=theme.stage_stroke,
        stroke_width=theme.stroke_width,
    ))
    if bounds.width > 0 and bounds.height > 0:
        group.append(draw.Rectangle(
            bounds.left, bounds.top, bounds.width, bounds.height,
            fill=theme.safe_area_fill,
            stroke=theme.safe_area_stroke,
            stroke_width=theme.stroke_width,
        ))


def _render_candidates(
    group: draw.Group,
    explanation: Explanation,
    popup_size: PopupSize,
    theme: Theme,
) -> None:
    """Outline every feasible candidate, labelled with its side."""
    for placement in explanation.order:
        candidate = explanation.candidates.get(placement)
        if candidate is None:
            continue
        width, height = candidate.extent(popup_size)
        group.append(draw.Rectangle(
            candidate.x, candidate.y, width, height,
            fill="none",
            stroke=theme.candidate_stroke,
            stroke_width=theme.stroke_width,
            stroke_dasharray=CANDIDATE_DASH,
        ))
        group.append(draw.Text(
            placement.value,
            theme.label_font_size,
            candidate.x + LABEL_INSET, candidate.y + LABEL_INSET,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            dominant_baseline="hanging",
        ))


def _render_pointer(group: draw.Group, scenario: Scenario, theme: Theme) -> None:
    """Draw the pointer and its clearance box."""
    if scenario.mouse_pos is None:
        return
    x, y = scenario.mouse_pos.x, scenario.mouse_pos.y
    clearance = scenario.cursor_clearance

    box_w = clearance.left + clearance.right
    box_h = clearance.top + clearance.bottom
    if box_w > 0 and box_h > 0:
        group.append(draw.Rectangle(
            x - clearance.left, y - clearance.top, box_w, box_h,
            fill="none",
            stroke=theme.clearance_stroke,
            stroke_width=theme.stroke_width,
        ))
    group.append(draw.Circle(x, y, theme.pointer_radius, fill=theme.pointer_color))


def _render_popup(
    group: draw.Group,
    explanation: Explanation,
    scenario: Scenario,
    theme: Theme,
) -> None:
    """Draw the chosen popup; a dashed outline shows any clamped-off part."""
    selection = explanation.selection
    position: PopupPosition = selection.position
    if selection.tier == TIER_FIXED:
        # Fixed placements are already in page coordinates
        position = position.translated(
            -scenario.document.scroll_x, -scenario.document.scroll_y
        )

    popup_size = scenario.popup_size
    width, height = position.extent(popup_size)

    if width < popup_size.width or height < popup_size.height:
        group.append(draw.Rectangle(
            position.x, position.y, popup_size.width, popup_size.height,
            fill="none",
            stroke=theme.overflow_stroke,
            stroke_width=theme.stroke_width,
            stroke_dasharray=OVERFLOW_DASH,
        ))

    group.append(draw.Rectangle(
        position.x, position.y, width, height,
        fill=theme.popup_fill,
        stroke=theme.popup_stroke,
        stroke_width=theme.stroke_width * 1.5,
    ))

    label = selection.placement.value if selection.placement else selection.tier
    group.append(draw.Text(
        label,
        theme.label_font_size,
        position.x + width / 2, position.y + height / 2,
        fill=theme.label_color,
        font_family=theme.label_font_family,
        font_weight="bold",
        text_anchor="middle",
        dominant_baseline="central",
    ))
