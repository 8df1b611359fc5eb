"""Placement coordinator: combines stage measurement, candidate generation,
preference ordering and selection.

Selection falls through three tiers and always produces a position:

1. ``block``: the first block-direction candidate that passes the
   orientation-specific acceptance test.
2. ``best-area``: otherwise the widest feasible candidate, ties broken by
   the larger (clamped) area.
3. ``fallback``: if every side is infeasible, the safe area's top-left.
"""

from __future__ import annotations

__all__ = [
    "Explanation",
    "Selection",
    "compute_popup_position",
    "explain_popup_position",
    "is_acceptable_block_layout",
    "select_layout",
    "size_key",
]

from collections.abc import Callable
from dataclasses import dataclass

from popup_position.layout.candidates import compute_candidates
from popup_position.layout.constants import GUTTER, MARGIN_TO_POPUP
from popup_position.layout.fixed import fixed_position
from popup_position.layout.ordering import BLOCK_PAIR_SIZE, preference_order
from popup_position.layout.stage import DocumentMetrics, Stage, compose_stage
from popup_position.model import (
    MarginBox,
    PaddingBox,
    Placement,
    Point,
    PointerType,
    PopupPosition,
    PopupSize,
    PositionMode,
    SafeBoundaries,
)

TIER_BLOCK = "block"
TIER_BEST_AREA = "best-area"
TIER_FALLBACK = "fallback"
TIER_FIXED = "fixed"


@dataclass(frozen=True)
class Selection:
    """Outcome of choosing among candidates (viewport coordinates)."""

    placement: Placement | None
    position: PopupPosition
    tier: str


@dataclass(frozen=True)
class Explanation:
    """Everything that went into one placement decision."""

    stage: Stage
    bounds: SafeBoundaries
    candidates: dict[Placement, PopupPosition | None]
    order: list[Placement]
    selection: Selection
    result: PopupPosition


def is_acceptable_block_layout(
    candidate: PopupPosition,
    popup_size: PopupSize,
    bounds: SafeBoundaries,
    is_vertical_text: bool,
) -> bool:
    """Acceptance test for a block-direction candidate.

    Vertical text wants an unclamped width. Horizontal text wants a layout
    that is neither height-clamped nor running past the safe bottom.
    """
    if is_vertical_text:
        return candidate.constrain_width is None

    _, height = candidate.extent(popup_size)
    return candidate.constrain_height is None and candidate.y + height < bounds.bottom


def size_key(
    popup_size: PopupSize,
) -> Callable[[PopupPosition | None], tuple[bool, float, float]]:
    """Sort key ranking candidates widest first, then by larger area.

    Losing a few rows off the bottom of a popup is tolerable; clipping every
    row on the right is not, so width dominates. Infeasible entries sort last.
    """

    def key(candidate: PopupPosition | None) -> tuple[bool, float, float]:
        if candidate is None:
            return (True, 0.0, 0.0)
        width, height = candidate.extent(popup_size)
        return (False, -width, -(width * height))

    return key


def select_layout(
    candidates: dict[Placement, PopupPosition | None],
    order: list[Placement],
    popup_size: PopupSize,
    bounds: SafeBoundaries,
    is_vertical_text: bool,
) -> Selection:
    """Pick a candidate (viewport coordinates) following the tier policy."""
    for placement in order[:BLOCK_PAIR_SIZE]:
        candidate = candidates.get(placement)
        if candidate is None:
            continue
        if is_acceptable_block_layout(candidate, popup_size, bounds, is_vertical_text):
            return Selection(placement, candidate, TIER_BLOCK)

    key = size_key(popup_size)
    ranked = sorted(order, key=lambda p: key(candidates.get(p)))
    if ranked:
        best = candidates.get(ranked[0])
        if best is not None:
            return Selection(ranked[0], best, TIER_BEST_AREA)

    return Selection(
        None,
        PopupPosition(x=bounds.left, y=bounds.top),
        TIER_FALLBACK,
    )


def explain_popup_position(
    *,
    cursor_clearance: MarginBox,
    document: DocumentMetrics,
    is_vertical_text: bool,
    mouse_pos: Point | None,
    popup_size: PopupSize,
    position_mode: PositionMode,
    safe_area: PaddingBox,
    pointer_type: PointerType,
    gutter: float = GUTTER,
    margin_to_popup: float = MARGIN_TO_POPUP,
) -> Explanation:
    """Run the full placement and return every intermediate result."""
    stage = compose_stage(document, safe_area, gutter=gutter)
    bounds = stage.boundaries

    if position_mode is not PositionMode.AUTO:
        result = fixed_position(
            position_mode,
            stage,
            popup_size,
            scroll_x=document.scroll_x,
            scroll_y=document.scroll_y,
        )
        return Explanation(
            stage=stage,
            bounds=bounds,
            candidates={},
            order=[],
            selection=Selection(None, result, TIER_FIXED),
            result=result,
        )

    target = mouse_pos if mouse_pos is not None else Point(0.0, 0.0)
    candidates = compute_candidates(
        cursor_clearance,
        popup_size,
        bounds,
        target,
        pointer_type,
        document,
        margin_to_popup=margin_to_popup,
    )
    order = preference_order(is_vertical_text, pointer_type)
    selection = select_layout(candidates, order, popup_size, bounds, is_vertical_text)

    if selection.tier == TIER_FALLBACK:
        result = selection.position
    else:
        result = selection.position.translated(document.scroll_x, document.scroll_y)

    return Explanation(
        stage=stage,
        bounds=bounds,
        candidates=candidates,
        order=order,
        selection=selection,
        result=result,
    )


def compute_popup_position(
    *,
    cursor_clearance: MarginBox,
    document: DocumentMetrics,
    is_vertical_text: bool,
    mouse_pos: Point | None,
    popup_size: PopupSize,
    position_mode: PositionMode,
    safe_area: PaddingBox,
    pointer_type: PointerType,
    gutter: float = GUTTER,
    margin_to_popup: float = MARGIN_TO_POPUP,
) -> PopupPosition:
    """Compute where to show the popup, in page coordinates.

    Args:
        cursor_clearance: Space to keep clear around the pointer, per side.
        document: Client size, scroll offsets and overflow styles of the
            hosting document.
        is_vertical_text: Whether the text under the pointer is laid out in
            vertical columns.
        mouse_pos: Pointer position in viewport coordinates, or None
            (treated as the origin).
        popup_size: Natural size of the popup content.
        position_mode: AUTO for pointer-relative placement, or a fixed corner.
        safe_area: Insets (notches, browser chrome) to keep the popup out of.
        pointer_type: CURSOR for a mouse, PUCK for touch/pen.

    Returns the popup's top-left corner plus optional width/height clamps.
    """
    return explain_popup_position(
        cursor_clearance=cursor_clearance,
        document=document,
        is_vertical_text=is_vertical_text,
        mouse_pos=mouse_pos,
        popup_size=popup_size,
        position_mode=position_mode,
        safe_area=safe_area,
        pointer_type=pointer_type,
        gutter=gutter,
        margin_to_popup=margin_to_popup,
    ).result
