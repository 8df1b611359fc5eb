"""Layout constants used across layout modules.

Centralizes magic numbers from stage.py, candidates.py and engine.py.
"""

# ---------------------------------------------------------------------------
# Safe area
# ---------------------------------------------------------------------------
GUTTER: float = 5.0
"""Minimum space between the edge of the popup and the edge of the stage.

Added to every side of the caller's safe-area insets, so there is breathing
room even when the insets are all zero.
"""

# ---------------------------------------------------------------------------
# Pointer-relative placement
# ---------------------------------------------------------------------------
MARGIN_TO_POPUP: float = 25.0
"""Gap between the pointer's clearance box and the nearest popup edge."""

# ---------------------------------------------------------------------------
# Scrollability checks
# ---------------------------------------------------------------------------
OVERFLOW_VISIBLE: str = "visible"
"""Computed ``overflow-y`` value meaning the element scrolls with the page."""

ROOT_ELEMENT: str = "root"
"""Key for the document's root element in overflow queries."""

BODY_ELEMENT: str = "body"
"""Key for the document body in overflow queries."""
