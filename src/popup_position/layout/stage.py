"""Stage measurement: turns document metrics and insets into a safe area.

The stage is the visible part of the document (the viewport). Its width
comes from the content-box client width so scrollbars are excluded; its
height needs a couple of adjustments for quirks mode and for platforms that
measure safe-area insets from the full window.
"""

from __future__ import annotations

__all__ = ["DocumentMetrics", "Stage", "compose_stage"]

from dataclasses import dataclass, field

from popup_position.layout.constants import (
    BODY_ELEMENT,
    GUTTER,
    OVERFLOW_VISIBLE,
    ROOT_ELEMENT,
)
from popup_position.model import PaddingBox, SafeBoundaries


@dataclass
class DocumentMetrics:
    """Read-only facts about the hosting document.

    This is the engine's only view of the environment. Callers fill it from
    the real document; tests construct it directly.
    """

    client_width: float
    client_height: float
    quirks_mode: bool = False
    # Body client height, used in quirks mode (None if there is no body)
    body_client_height: float | None = None
    # Window inner height; defaults to client_height
    inner_height: float | None = None
    scroll_x: float = 0.0
    scroll_y: float = 0.0
    # Total scrollable height of the document; defaults to client_height
    scroll_height: float | None = None
    # Computed overflow-y per element ("root", "body"); missing means visible
    overflow_y: dict[str, str] = field(default_factory=dict)

    @property
    def window_inner_height(self) -> float:
        if self.inner_height is None:
            return self.client_height
        return self.inner_height

    @property
    def document_scroll_height(self) -> float:
        if self.scroll_height is None:
            return self.client_height
        return self.scroll_height

    def computed_overflow_y(self, element: str) -> str:
        """Return the computed ``overflow-y`` of ``element``."""
        return self.overflow_y.get(element, OVERFLOW_VISIBLE)

    def page_scrolls(self) -> bool:
        """True if the page itself scrolls, i.e. neither the root nor the
        body clips its overflow."""
        return (
            self.computed_overflow_y(ROOT_ELEMENT) == OVERFLOW_VISIBLE
            and self.computed_overflow_y(BODY_ELEMENT) == OVERFLOW_VISIBLE
        )


@dataclass(frozen=True)
class Stage:
    """Measured stage size plus the effective (gutter-inflated) safe area."""

    width: float
    height: float
    safe_area: PaddingBox

    @property
    def boundaries(self) -> SafeBoundaries:
        """Viewport coordinates of the safe area's edges."""
        return SafeBoundaries(
            left=self.safe_area.left,
            right=self.width - self.safe_area.right,
            top=self.safe_area.top,
            bottom=self.height - self.safe_area.bottom,
        )

    @property
    def available_height(self) -> float:
        return self.height - (self.safe_area.top + self.safe_area.bottom)


def compose_stage(
    metrics: DocumentMetrics,
    safe_area: PaddingBox,
    gutter: float = GUTTER,
) -> Stage:
    """Measure the stage and merge the gutter into the caller's insets.

    The height rules are applied in order:

    1. Normally the root's client height.
    2. In quirks mode the body carries the viewport height, so use it
       (or the window's inner height if there is no body height).
    3. If either vertical inset is non-zero, use the window's inner height,
       since some platforms measure safe-area insets from the full window.
    """
    stage_width = metrics.client_width

    stage_height = metrics.client_height
    if metrics.quirks_mode:
        stage_height = metrics.body_client_height or metrics.window_inner_height
    if safe_area.top != 0 or safe_area.bottom != 0:
        stage_height = metrics.window_inner_height

    return Stage(
        width=stage_width,
        height=stage_height,
        safe_area=safe_area.inflate(gutter),
    )
