"""Popup placement engine.

Public API:
- compute_popup_position: Main entry point
- explain_popup_position: Same, returning every intermediate result
- DocumentMetrics: Injected view of the hosting document
- compose_stage: Safe-area composer
"""

from popup_position.layout.engine import (
    Explanation,
    Selection,
    compute_popup_position,
    explain_popup_position,
)
from popup_position.layout.stage import DocumentMetrics, Stage, compose_stage

__all__ = [
    "DocumentMetrics",
    "Explanation",
    "Selection",
    "Stage",
    "compose_stage",
    "compute_popup_position",
    "explain_popup_position",
]
