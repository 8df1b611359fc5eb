"""Tests for the per-side candidate layouts.

These tests directly verify the invariants that are easy to accidentally
break when modifying the shared axis logic:

1. Above/below and left/right are mirror images of one algorithm.
2. A side with no room at all is infeasible (None), never a zero clamp.
3. Clamps only ever shrink the popup.
4. The pointer-type rules for dropping height clamps apply only where
   the user can scroll without dismissing the popup.
"""

from __future__ import annotations

import pytest

from popup_position.layout.candidates import compute_candidates, place_on_side
from popup_position.layout.stage import DocumentMetrics
from popup_position.model import (
    MarginBox,
    Placement,
    Point,
    PointerType,
    PopupSize,
    SafeBoundaries,
)

BOUNDS = SafeBoundaries(left=5, right=995, top=5, bottom=795)
METRICS = DocumentMetrics(client_width=1000, client_height=800)
NO_CLEARANCE = MarginBox()
POPUP = PopupSize(300, 200)


def _place(
    placement,
    target,
    popup=POPUP,
    pointer_type=PointerType.CURSOR,
    clearance=NO_CLEARANCE,
    bounds=BOUNDS,
    metrics=METRICS,
):
    return place_on_side(
        placement, clearance, popup, bounds, target, pointer_type, metrics
    )


# ---------------------------------------------------------------------------
# Above / below
# ---------------------------------------------------------------------------


class TestBelow:
    def test_offset_by_margin(self):
        result = _place(Placement.BELOW, Point(500, 400))
        assert (result.x, result.y) == (500, 425)
        assert result.constrain_width is None
        assert result.constrain_height is None

    def test_offset_by_clearance(self):
        clearance = MarginBox(top=3, bottom=18, left=4, right=12)
        result = _place(Placement.BELOW, Point(500, 400), clearance=clearance)
        assert result.y == 400 + 18 + 25

    def test_infeasible_past_safe_bottom(self):
        assert _place(Placement.BELOW, Point(500, 780)) is None

    def test_infeasible_exactly_at_safe_bottom(self):
        assert _place(Placement.BELOW, Point(500, 770)) is None

    def test_clamped_when_page_cannot_scroll(self):
        metrics = DocumentMetrics(
            client_width=1000, client_height=800, overflow_y={"body": "hidden"}
        )
        result = _place(Placement.BELOW, Point(500, 700), metrics=metrics)
        assert result.y == 725
        assert result.constrain_height == pytest.approx(70)

    def test_clamp_dropped_when_document_is_long_enough(self):
        metrics = DocumentMetrics(
            client_width=1000, client_height=800, scroll_height=2000
        )
        result = _place(Placement.BELOW, Point(500, 700), metrics=metrics)
        assert result.constrain_height is None

    def test_clamp_kept_at_end_of_document(self):
        # The document is no taller than the viewport: nothing to scroll
        result = _place(Placement.BELOW, Point(500, 700))
        assert result.constrain_height == pytest.approx(70)

    def test_scroll_offset_counts_toward_extent(self):
        metrics = DocumentMetrics(
            client_width=1000, client_height=800, scroll_y=1100, scroll_height=2000
        )
        # 1100 + 725 + 200 = 2025, which the document can't reach
        result = _place(Placement.BELOW, Point(500, 700), metrics=metrics)
        assert result.constrain_height == pytest.approx(70)

    def test_puck_keeps_clamp(self):
        metrics = DocumentMetrics(
            client_width=1000, client_height=800, scroll_height=2000
        )
        result = _place(
            Placement.BELOW,
            Point(500, 700),
            pointer_type=PointerType.PUCK,
            metrics=metrics,
        )
        assert result.constrain_height == pytest.approx(70)

    def test_infeasible_without_horizontal_span(self):
        bounds = SafeBoundaries(left=300, right=300, top=5, bottom=795)
        assert _place(Placement.BELOW, Point(300, 400), bounds=bounds) is None


class TestAbove:
    def test_bottom_edge_clears_pointer(self):
        result = _place(Placement.ABOVE, Point(500, 400))
        assert result.y + 200 == 375
        assert result.constrain_height is None

    def test_clamped_to_safe_top(self):
        result = _place(Placement.ABOVE, Point(500, 130))
        assert result.y == 5
        assert result.constrain_height == pytest.approx(100)

    def test_cursor_keeps_clamp(self):
        """Dropping the clamp would make the popup cover the pointer."""
        metrics = DocumentMetrics(
            client_width=1000, client_height=800, scroll_height=5000
        )
        result = _place(Placement.ABOVE, Point(500, 130), metrics=metrics)
        assert result.constrain_height == pytest.approx(100)

    def test_infeasible_near_top(self):
        assert _place(Placement.ABOVE, Point(500, 20)) is None

    def test_infeasible_when_span_is_zero(self):
        assert _place(Placement.ABOVE, Point(500, 30)) is None

    def test_infeasible_without_horizontal_span(self):
        bounds = SafeBoundaries(left=300, right=300, top=5, bottom=795)
        assert _place(Placement.ABOVE, Point(300, 400), bounds=bounds) is None


class TestHorizontalAlignment:
    """Above/below share the same horizontal clamping."""

    @pytest.mark.parametrize("placement", [Placement.ABOVE, Placement.BELOW])
    def test_aligned_with_pointer(self, placement):
        assert _place(placement, Point(200, 400)).x == 200

    @pytest.mark.parametrize("placement", [Placement.ABOVE, Placement.BELOW])
    def test_slides_left_to_fit(self, placement):
        result = _place(placement, Point(900, 400))
        assert result.x + 300 == 995
        assert result.constrain_width is None

    @pytest.mark.parametrize("placement", [Placement.ABOVE, Placement.BELOW])
    def test_wide_popup_is_clamped(self, placement):
        result = _place(placement, Point(900, 400), popup=PopupSize(1200, 200))
        assert result.x == 5
        assert result.constrain_width == pytest.approx(990)


# ---------------------------------------------------------------------------
# Left / right
# ---------------------------------------------------------------------------


class TestRight:
    def test_offset_by_margin(self):
        result = _place(Placement.RIGHT, Point(500, 400))
        assert (result.x, result.y) == (525, 400)
        assert result.constrain_width is None

    def test_width_clamped(self):
        result = _place(Placement.RIGHT, Point(900, 400))
        assert result.x == 925
        assert result.constrain_width == pytest.approx(70)

    def test_infeasible_past_safe_right(self):
        assert _place(Placement.RIGHT, Point(975, 400)) is None


class TestLeft:
    def test_right_edge_clears_pointer(self):
        clearance = MarginBox(left=10)
        result = _place(Placement.LEFT, Point(500, 400), clearance=clearance)
        assert result.x + 300 == 500 - 10 - 25
        assert result.constrain_width is None

    def test_width_clamped(self):
        result = _place(Placement.LEFT, Point(100, 400))
        assert result.x == 5
        assert result.constrain_width == pytest.approx(70)

    def test_infeasible_near_left(self):
        assert _place(Placement.LEFT, Point(25, 400)) is None


class TestVerticalAlignment:
    """Left/right share the same vertical clamping and pointer-type rule."""

    @pytest.mark.parametrize("placement", [Placement.LEFT, Placement.RIGHT])
    def test_slides_up_to_fit(self, placement):
        result = _place(placement, Point(500, 700))
        assert result.y + 200 == 795
        assert result.constrain_height is None

    @pytest.mark.parametrize("placement", [Placement.LEFT, Placement.RIGHT])
    def test_cursor_drops_height_clamp(self, placement):
        result = _place(placement, Point(500, 400), popup=PopupSize(300, 1000))
        assert result.y == 5
        assert result.constrain_height is None

    @pytest.mark.parametrize("placement", [Placement.LEFT, Placement.RIGHT])
    def test_puck_keeps_height_clamp(self, placement):
        result = _place(
            placement,
            Point(500, 400),
            popup=PopupSize(300, 1000),
            pointer_type=PointerType.PUCK,
        )
        assert result.y == 5
        assert result.constrain_height == pytest.approx(790)

    @pytest.mark.parametrize("placement", [Placement.LEFT, Placement.RIGHT])
    def test_infeasible_without_vertical_span(self, placement):
        bounds = SafeBoundaries(left=5, right=995, top=300, bottom=300)
        assert _place(placement, Point(500, 300), bounds=bounds) is None


# ---------------------------------------------------------------------------
# Symmetry
# ---------------------------------------------------------------------------


class TestMirrorSymmetry:
    """Swapping axes turns above/below into left/right."""

    SQUARE = SafeBoundaries(left=5, right=795, top=5, bottom=795)

    @pytest.mark.parametrize(
        "vertical,horizontal",
        [(Placement.ABOVE, Placement.LEFT), (Placement.BELOW, Placement.RIGHT)],
    )
    @pytest.mark.parametrize("px,py", [(100, 400), (400, 400), (650, 120)])
    def test_transposed(self, vertical, horizontal, px, py):
        v = _place(
            vertical,
            Point(px, py),
            popup=PopupSize(300, 200),
            pointer_type=PointerType.PUCK,
            bounds=self.SQUARE,
        )
        h = _place(
            horizontal,
            Point(py, px),
            popup=PopupSize(200, 300),
            pointer_type=PointerType.PUCK,
            bounds=self.SQUARE,
        )
        if v is None:
            assert h is None
            return
        assert (h.x, h.y) == (v.y, v.x)
        assert h.constrain_width == v.constrain_height
        assert h.constrain_height == v.constrain_width


def test_compute_candidates_covers_every_side():
    candidates = compute_candidates(
        NO_CLEARANCE, POPUP, BOUNDS, Point(500, 400), PointerType.CURSOR, METRICS
    )
    assert set(candidates) == set(Placement)
    assert all(c is not None for c in candidates.values())


def test_custom_margin():
    result = place_on_side(
        Placement.BELOW,
        NO_CLEARANCE,
        POPUP,
        BOUNDS,
        Point(500, 400),
        PointerType.CURSOR,
        METRICS,
        margin_to_popup=10,
    )
    assert result.y == 410
