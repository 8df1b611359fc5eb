"""Preference ordering of candidate placements.

The order is built from two pairs:

- the horizontal pair, right before left;
- the vertical pair, below before above for a mouse cursor, but above
  before below for a touch puck so the popup doesn't sit under the finger.

For vertical text the horizontal pair comes first, otherwise the vertical
pair does. The first pair is the block-direction pair.
"""

from __future__ import annotations

__all__ = ["preference_order", "BLOCK_PAIR_SIZE"]

from popup_position.model import Placement, PointerType

BLOCK_PAIR_SIZE = 2


def preference_order(
    is_vertical_text: bool,
    pointer_type: PointerType,
) -> list[Placement]:
    """Return all four placements in the order they should be tried."""
    horizontal = [Placement.RIGHT, Placement.LEFT]
    if pointer_type is PointerType.PUCK:
        vertical = [Placement.ABOVE, Placement.BELOW]
    else:
        vertical = [Placement.BELOW, Placement.ABOVE]

    if is_vertical_text:
        return horizontal + vertical
    return vertical + horizontal
