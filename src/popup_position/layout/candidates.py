"""Candidate layouts on each side of the pointer.

All four sides run the same algorithm, parametrised by an axis descriptor:

- On the *primary* axis the popup is pushed away from the pointer by the
  pointer clearance plus a fixed margin. On the near side (above/left) it
  may not extend past the pointer; on the far side (below/right) it may
  not extend past the safe area. If there is no room at all the candidate
  is infeasible; if there is some room the popup is clamped to it.
- On the *cross* axis the popup starts at the pointer and slides back
  toward the safe start until it fits, clamping if it still doesn't.

Two pointer-type rules are layered on top:

- Cursor + below: the height clamp is dropped when the page can scroll far
  enough to show the popup at its natural height.
- Cursor + left/right: the height clamp is always dropped, since the user
  can scroll vertically without dismissing the popup.

Infeasible candidates are returned as ``None``.
"""

from __future__ import annotations

__all__ = ["SideAxis", "SIDE_AXES", "compute_candidates", "place_on_side"]

from dataclasses import dataclass

from popup_position.layout.constants import MARGIN_TO_POPUP
from popup_position.layout.stage import DocumentMetrics
from popup_position.model import (
    MarginBox,
    Placement,
    Point,
    PointerType,
    PopupPosition,
    PopupSize,
    SafeBoundaries,
)


@dataclass(frozen=True)
class SideAxis:
    """Describes one side: which axis is primary and which way it points."""

    placement: Placement
    vertical: bool  # primary axis is y
    before: bool  # popup sits before the pointer (above/left)


SIDE_AXES: dict[Placement, SideAxis] = {
    Placement.ABOVE: SideAxis(Placement.ABOVE, vertical=True, before=True),
    Placement.BELOW: SideAxis(Placement.BELOW, vertical=True, before=False),
    Placement.LEFT: SideAxis(Placement.LEFT, vertical=False, before=True),
    Placement.RIGHT: SideAxis(Placement.RIGHT, vertical=False, before=False),
}


def _span(bounds: SafeBoundaries, vertical: bool) -> tuple[float, float]:
    if vertical:
        return (bounds.top, bounds.bottom)
    return (bounds.left, bounds.right)


def _coord(point: Point, vertical: bool) -> float:
    return point.y if vertical else point.x


def _length(size: PopupSize, vertical: bool) -> float:
    return size.height if vertical else size.width


def _primary(
    axis: SideAxis,
    target: float,
    length: float,
    clearance: float,
    margin: float,
    safe_start: float,
    safe_end: float,
) -> tuple[float, float | None] | None:
    """Return (position, constraint) on the primary axis, or None if there
    is no room on this side."""
    if axis.before:
        # The popup's far edge must stay clear of the pointer
        limit = target - (margin + clearance)
        pos = max(safe_start, limit - length)
        if pos >= limit:
            return None
    else:
        limit = safe_end
        pos = target + clearance + margin
        if pos >= limit:
            return None

    constraint = limit - pos if pos + length > limit else None
    return (pos, constraint)


def _cross(
    target: float,
    length: float,
    safe_start: float,
    safe_end: float,
) -> tuple[float, float | None]:
    """Return (position, constraint) on the cross axis.

    Prefers aligning the popup's start edge with the pointer, sliding it
    back toward ``safe_start`` only as far as needed to fit.
    """
    pos = target
    if pos + length > safe_end:
        pos = max(safe_start, safe_end - length)
    constraint = safe_end - pos if pos + length > safe_end else None
    return (pos, constraint)


def place_on_side(
    placement: Placement,
    cursor_clearance: MarginBox,
    popup_size: PopupSize,
    bounds: SafeBoundaries,
    target: Point,
    pointer_type: PointerType,
    metrics: DocumentMetrics,
    margin_to_popup: float = MARGIN_TO_POPUP,
) -> PopupPosition | None:
    """Compute the candidate layout on one side of ``target``.

    All coordinates are viewport-relative. ``metrics`` is only consulted for
    the cursor + below scroll check.
    """
    axis = SIDE_AXES[placement]

    cross_start, cross_end = _span(bounds, not axis.vertical)
    if cross_end <= cross_start:
        return None

    primary_start, primary_end = _span(bounds, axis.vertical)
    primary = _primary(
        axis,
        target=_coord(target, axis.vertical),
        length=_length(popup_size, axis.vertical),
        clearance=cursor_clearance.side(placement),
        margin=margin_to_popup,
        safe_start=primary_start,
        safe_end=primary_end,
    )
    if primary is None:
        return None

    cross = _cross(
        target=_coord(target, not axis.vertical),
        length=_length(popup_size, not axis.vertical),
        safe_start=cross_start,
        safe_end=cross_end,
    )

    if axis.vertical:
        (y, constrain_height), (x, constrain_width) = primary, cross
    else:
        (x, constrain_width), (y, constrain_height) = primary, cross

    if pointer_type is PointerType.CURSOR and constrain_height is not None:
        if placement is Placement.BELOW:
            if _page_can_show(y, popup_size, bounds, metrics):
                constrain_height = None
        elif not axis.vertical:
            constrain_height = None

    return PopupPosition(
        x=x,
        y=y,
        constrain_width=constrain_width,
        constrain_height=constrain_height,
    )


def _page_can_show(
    y: float,
    popup_size: PopupSize,
    bounds: SafeBoundaries,
    metrics: DocumentMetrics,
) -> bool:
    """Check whether the document has room to scroll a popup at viewport
    ``y`` fully into view at its natural height.

    Only when both the root and the body let content overflow is the whole
    document height usable; otherwise the popup has to fit the safe area.
    """
    extent = metrics.scroll_y + y + popup_size.height
    if metrics.page_scrolls():
        available = metrics.document_scroll_height
    else:
        available = bounds.bottom
    return extent < available


def compute_candidates(
    cursor_clearance: MarginBox,
    popup_size: PopupSize,
    bounds: SafeBoundaries,
    target: Point,
    pointer_type: PointerType,
    metrics: DocumentMetrics,
    margin_to_popup: float = MARGIN_TO_POPUP,
) -> dict[Placement, PopupPosition | None]:
    """Compute the candidate layout for every side of the pointer."""
    return {
        placement: place_on_side(
            placement,
            cursor_clearance,
            popup_size,
            bounds,
            target,
            pointer_type,
            metrics,
            margin_to_popup=margin_to_popup,
        )
        for placement in Placement
    }
