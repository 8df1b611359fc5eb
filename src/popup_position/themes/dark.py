"""Dark grey theme."""

from popup_position.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    stage_stroke="#888888",
    safe_area_fill="rgba(255, 255, 255, 0.06)",
    safe_area_stroke="rgba(255, 255, 255, 0.3)",
    pointer_color="#ff5f56",
    clearance_stroke="#ff9f43",
    candidate_stroke="#6c9fd8",
    popup_fill="rgba(36, 161, 72, 0.35)",
    popup_stroke="#24a148",
    overflow_stroke="#9be3ad",
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#ffffff",
    title_font_size=20.0,
)
