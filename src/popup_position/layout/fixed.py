"""Fixed-corner placement (top-left / bottom-right of the safe area)."""

from __future__ import annotations

__all__ = ["fixed_position"]

from popup_position.layout.stage import Stage
from popup_position.model import PopupPosition, PopupSize, PositionMode


def fixed_position(
    mode: PositionMode,
    stage: Stage,
    popup_size: PopupSize,
    scroll_x: float = 0.0,
    scroll_y: float = 0.0,
) -> PopupPosition:
    """Pin the popup to a corner of the safe area, in page coordinates.

    For BOTTOM_RIGHT, a popup taller than the available height is positioned
    against the available height so its top edge stays on the safe top. No
    height constraint is emitted in that case: the caller lets the user
    scroll the overflow instead.
    """
    safe = stage.safe_area

    if mode is PositionMode.TOP_LEFT:
        return PopupPosition(x=scroll_x + safe.left, y=scroll_y + safe.top)

    if mode is PositionMode.BOTTOM_RIGHT:
        visible_height = min(popup_size.height, stage.available_height)
        return PopupPosition(
            x=scroll_x + stage.width - popup_size.width - safe.right,
            y=scroll_y + stage.height - visible_height - safe.bottom,
        )

    raise ValueError(f"{mode} is not a fixed position mode")
