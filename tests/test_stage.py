"""Tests for stage measurement and safe-area composition."""

import pytest

from popup_position.layout.constants import GUTTER
from popup_position.layout.stage import DocumentMetrics, compose_stage
from popup_position.model import PaddingBox


def test_width_uses_client_width():
    metrics = DocumentMetrics(client_width=985, client_height=700, inner_height=720)
    stage = compose_stage(metrics, PaddingBox())
    assert stage.width == 985


def test_height_uses_client_height_by_default():
    metrics = DocumentMetrics(client_width=1000, client_height=700, inner_height=720)
    stage = compose_stage(metrics, PaddingBox())
    assert stage.height == 700


def test_quirks_mode_uses_body_height():
    metrics = DocumentMetrics(
        client_width=1000,
        client_height=3000,
        quirks_mode=True,
        body_client_height=690,
        inner_height=720,
    )
    assert compose_stage(metrics, PaddingBox()).height == 690


def test_quirks_mode_without_body_uses_inner_height():
    metrics = DocumentMetrics(
        client_width=1000, client_height=3000, quirks_mode=True, inner_height=720
    )
    assert compose_stage(metrics, PaddingBox()).height == 720


def test_quirks_mode_zero_body_height_uses_inner_height():
    metrics = DocumentMetrics(
        client_width=1000,
        client_height=3000,
        quirks_mode=True,
        body_client_height=0,
        inner_height=720,
    )
    assert compose_stage(metrics, PaddingBox()).height == 720


@pytest.mark.parametrize(
    "safe_area",
    [PaddingBox(top=47), PaddingBox(bottom=34), PaddingBox(top=20, bottom=20)],
)
def test_vertical_insets_use_inner_height(safe_area):
    metrics = DocumentMetrics(client_width=390, client_height=664, inner_height=844)
    assert compose_stage(metrics, safe_area).height == 844


def test_horizontal_insets_keep_client_height():
    metrics = DocumentMetrics(client_width=844, client_height=340, inner_height=390)
    stage = compose_stage(metrics, PaddingBox(left=47, right=47))
    assert stage.height == 340


def test_gutter_inflates_every_side():
    metrics = DocumentMetrics(client_width=1000, client_height=800)
    stage = compose_stage(metrics, PaddingBox(top=10, bottom=0, left=3, right=7))
    assert stage.safe_area == PaddingBox(
        top=10 + GUTTER, bottom=GUTTER, left=3 + GUTTER, right=7 + GUTTER
    )


def test_custom_gutter():
    metrics = DocumentMetrics(client_width=1000, client_height=800)
    stage = compose_stage(metrics, PaddingBox(), gutter=0)
    assert stage.safe_area == PaddingBox()


def test_boundaries():
    metrics = DocumentMetrics(client_width=1000, client_height=800)
    bounds = compose_stage(metrics, PaddingBox()).boundaries
    assert (bounds.left, bounds.right, bounds.top, bounds.bottom) == (5, 995, 5, 795)
    assert bounds.width == 990
    assert bounds.height == 790


def test_available_height():
    metrics = DocumentMetrics(client_width=1000, client_height=800)
    stage = compose_stage(metrics, PaddingBox(top=10, bottom=20))
    # Vertical insets switch to the inner height, which defaults to client height
    assert stage.available_height == 800 - (15 + 25)


class TestDocumentMetrics:
    def test_defaults_fall_back_to_client_height(self):
        metrics = DocumentMetrics(client_width=1000, client_height=800)
        assert metrics.window_inner_height == 800
        assert metrics.document_scroll_height == 800

    def test_missing_overflow_is_visible(self):
        metrics = DocumentMetrics(client_width=1000, client_height=800)
        assert metrics.computed_overflow_y("root") == "visible"
        assert metrics.page_scrolls()

    @pytest.mark.parametrize(
        "overflow",
        [{"root": "hidden"}, {"body": "auto"}, {"root": "scroll", "body": "hidden"}],
    )
    def test_any_clipping_element_stops_page_scroll(self, overflow):
        metrics = DocumentMetrics(
            client_width=1000, client_height=800, overflow_y=overflow
        )
        assert not metrics.page_scrolls()
