"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Padding around the stage inside the SVG canvas."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved above the stage for the title."""

# ---------------------------------------------------------------------------
# Candidates and popup
# ---------------------------------------------------------------------------
CANDIDATE_DASH: str = "4,3"
"""Dash pattern for candidate outlines."""

OVERFLOW_DASH: str = "2,4"
"""Dash pattern for the part of the popup cut off by a clamp."""

LABEL_INSET: float = 4.0
"""Inset of candidate labels from the candidate's top-left corner."""

STAGE_CORNER_RADIUS: float = 6.0
"""Corner radius of the stage outline."""
