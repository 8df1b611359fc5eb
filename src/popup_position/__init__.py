"""popup-position: place a floating panel next to a pointer inside a safe area."""

__version__ = "0.1.0"

from popup_position.layout import (  # noqa: E402
    DocumentMetrics,
    compute_popup_position,
    explain_popup_position,
)
from popup_position.model import (  # noqa: E402
    MarginBox,
    PaddingBox,
    Point,
    PointerType,
    PopupPosition,
    PopupSize,
    PositionMode,
)

__all__ = [
    "DocumentMetrics",
    "MarginBox",
    "PaddingBox",
    "Point",
    "PointerType",
    "PopupPosition",
    "PopupSize",
    "PositionMode",
    "compute_popup_position",
    "explain_popup_position",
]
