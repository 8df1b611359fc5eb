"""Parser for JSON placement scenarios.

A scenario captures one placement call: stage metrics, insets, pointer,
popup size and mode. Everything except the popup size is optional.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from popup_position.layout.engine import (
    Explanation,
    compute_popup_position,
    explain_popup_position,
)
from popup_position.layout.stage import DocumentMetrics
from popup_position.model import (
    MarginBox,
    PaddingBox,
    Point,
    PointerType,
    PopupPosition,
    PopupSize,
    PositionMode,
)

_SIDES = ("top", "bottom", "left", "right")


@dataclass
class Scenario:
    """A complete set of inputs for one placement."""

    document: DocumentMetrics
    popup_size: PopupSize
    title: str = ""
    safe_area: PaddingBox = field(default_factory=PaddingBox)
    cursor_clearance: MarginBox = field(default_factory=MarginBox)
    mouse_pos: Point | None = None
    position_mode: PositionMode = PositionMode.AUTO
    pointer_type: PointerType = PointerType.CURSOR
    is_vertical_text: bool = False

    def _engine_args(self) -> dict:
        return dict(
            cursor_clearance=self.cursor_clearance,
            document=self.document,
            is_vertical_text=self.is_vertical_text,
            mouse_pos=self.mouse_pos,
            popup_size=self.popup_size,
            position_mode=self.position_mode,
            safe_area=self.safe_area,
            pointer_type=self.pointer_type,
        )

    def compute(self) -> PopupPosition:
        return compute_popup_position(**self._engine_args())

    def explain(self) -> Explanation:
        return explain_popup_position(**self._engine_args())


def _number(obj: dict, key: str, where: str, default: float | None = None) -> float:
    value = obj.get(key, default)
    if value is None:
        raise ValueError(f"'{where}.{key}' is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{where}.{key}' must be a number, got {value!r}")
    return float(value)


def _optional_number(obj: dict, key: str, where: str) -> float | None:
    if obj.get(key) is None:
        return None
    return _number(obj, key, where)


def _flag(obj: dict, key: str, where: str = "", default: bool = False) -> bool:
    value = obj.get(key, default)
    if not isinstance(value, bool):
        name = f"{where}.{key}" if where else key
        raise ValueError(f"'{name}' must be true or false, got {value!r}")
    return value


def _overflow(stage: dict) -> dict[str, str]:
    overflow = stage.get("overflow_y") or {}
    if not isinstance(overflow, dict):
        raise ValueError(f"'stage.overflow_y' must be an object, got {overflow!r}")
    for element, value in overflow.items():
        if not isinstance(value, str):
            raise ValueError(
                f"'stage.overflow_y.{element}' must be a string, got {value!r}"
            )
    return dict(overflow)


def _object(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be an object, got {value!r}")
    return value


def _sides(data: dict, key: str) -> dict[str, float]:
    obj = _object(data, key)
    unknown = set(obj) - set(_SIDES)
    if unknown:
        raise ValueError(f"'{key}' has unknown sides: {', '.join(sorted(unknown))}")
    return {side: _number(obj, side, key, default=0.0) for side in _SIDES}


def _parse_document(data: dict) -> DocumentMetrics:
    stage = _object(data, "stage")
    if not stage:
        raise ValueError("'stage' is required (with at least width and height)")
    return DocumentMetrics(
        client_width=_number(stage, "width", "stage"),
        client_height=_number(stage, "height", "stage"),
        quirks_mode=_flag(stage, "quirks_mode", "stage"),
        body_client_height=_optional_number(stage, "body_client_height", "stage"),
        inner_height=_optional_number(stage, "inner_height", "stage"),
        scroll_x=_number(stage, "scroll_x", "stage", default=0.0),
        scroll_y=_number(stage, "scroll_y", "stage", default=0.0),
        scroll_height=_optional_number(stage, "scroll_height", "stage"),
        overflow_y=_overflow(stage),
    )


def _parse_popup(data: dict) -> PopupSize:
    popup = _object(data, "popup")
    if not popup:
        raise ValueError("'popup' is required (with width and height)")
    width = _number(popup, "width", "popup")
    height = _number(popup, "height", "popup")
    if width < 0 or height < 0:
        raise ValueError(f"Popup size must not be negative, got {width} x {height}")
    return PopupSize(width=width, height=height)


def _parse_pointer(data: dict) -> Point | None:
    pointer = data.get("pointer")
    if pointer is None:
        return None
    if not isinstance(pointer, dict):
        raise ValueError(f"'pointer' must be an object or null, got {pointer!r}")
    return Point(x=_number(pointer, "x", "pointer"), y=_number(pointer, "y", "pointer"))


def parse_scenario(text: str) -> Scenario:
    """Parse a JSON scenario definition."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("A scenario must be a JSON object")

    pointer_type = str(data.get("pointer_type", PointerType.CURSOR.value))
    try:
        pointer = PointerType(pointer_type.strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown pointer type '{pointer_type}'. Expected 'cursor' or 'puck'"
        ) from None

    return Scenario(
        document=_parse_document(data),
        popup_size=_parse_popup(data),
        title=str(data.get("title", "")),
        safe_area=PaddingBox(**_sides(data, "safe_area")),
        cursor_clearance=MarginBox(**_sides(data, "clearance")),
        mouse_pos=_parse_pointer(data),
        position_mode=PositionMode.parse(str(data.get("mode", "auto"))),
        pointer_type=pointer,
        is_vertical_text=_flag(data, "vertical_text"),
    )
