"""Data model for popup placement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PositionMode(Enum):
    """Where the popup goes: pinned to a corner, or next to the pointer."""

    TOP_LEFT = "top-left"
    AUTO = "auto"
    BOTTOM_RIGHT = "bottom-right"
    # Aliases used when stepping through the modes
    START = "top-left"
    END = "bottom-right"

    @classmethod
    def parse(cls, name: str) -> PositionMode:
        """Look up a mode by value or member name (``"top-left"``, ``"TopLeft"``,
        ``"bottom_right"``, ``"start"``...)."""
        key = name.strip().lower().replace("_", "-")
        for member_name, member in cls.__members__.items():
            if key in (member.value, member_name.lower().replace("_", "-")):
                return member
        compact = key.replace("-", "")
        for member in cls:
            if compact == member.value.replace("-", ""):
                return member
        raise ValueError(
            f"Unknown position mode '{name}'. "
            f"Expected one of: {', '.join(m.value for m in cls)}"
        )


def next_position_mode(mode: PositionMode) -> PositionMode:
    """Step forward through the position modes, wrapping at the end."""
    modes = list(PositionMode)
    return modes[(modes.index(mode) + 1) % len(modes)]


def previous_position_mode(mode: PositionMode) -> PositionMode:
    """Step backward through the position modes, wrapping at the start."""
    modes = list(PositionMode)
    return modes[(modes.index(mode) - 1) % len(modes)]


class PointerType(Enum):
    """Input modality that produced the target point."""

    CURSOR = "cursor"
    PUCK = "puck"


class Placement(Enum):
    """Side of the pointer a candidate layout sits on."""

    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point:
    """A location in page or viewport coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class MarginBox:
    """Clearance to keep around the pointer, per side."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    def side(self, placement: Placement) -> float:
        """Return the clearance on the side facing ``placement``."""
        return {
            Placement.ABOVE: self.top,
            Placement.BELOW: self.bottom,
            Placement.LEFT: self.left,
            Placement.RIGHT: self.right,
        }[placement]


@dataclass(frozen=True)
class PaddingBox:
    """Insets from the stage edges that the popup must keep clear of."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    def inflate(self, amount: float) -> PaddingBox:
        """Return a copy with ``amount`` added to every side."""
        return PaddingBox(
            top=self.top + amount,
            bottom=self.bottom + amount,
            left=self.left + amount,
            right=self.right + amount,
        )


@dataclass(frozen=True)
class PopupSize:
    """Natural (unconstrained) size of the popup content."""

    width: float
    height: float


@dataclass(frozen=True)
class SafeBoundaries:
    """Viewport coordinates of the safe area edges."""

    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class PopupPosition:
    """Where to put the popup's top-left corner, plus optional size clamps.

    ``constrain_width`` / ``constrain_height`` of ``None`` mean the popup is
    rendered at its natural size on that axis. A number means the popup must
    be shrunk (and scroll-clipped) to that extent.
    """

    x: float
    y: float
    constrain_width: float | None = None
    constrain_height: float | None = None

    def extent(self, popup_size: PopupSize) -> tuple[float, float]:
        """Return the (width, height) the popup occupies once clamped."""
        width = (
            self.constrain_width
            if self.constrain_width is not None
            else popup_size.width
        )
        height = (
            self.constrain_height
            if self.constrain_height is not None
            else popup_size.height
        )
        return (width, height)

    def translated(self, dx: float, dy: float) -> PopupPosition:
        """Return a copy moved by (dx, dy), keeping the clamps."""
        return PopupPosition(
            x=self.x + dx,
            y=self.y + dy,
            constrain_width=self.constrain_width,
            constrain_height=self.constrain_height,
        )

    def as_dict(self) -> dict[str, float | None]:
        return {
            "x": self.x,
            "y": self.y,
            "constrain_width": self.constrain_width,
            "constrain_height": self.constrain_height,
        }
