"""Light theme."""

from popup_position.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    stage_stroke="#333333",
    safe_area_fill="rgba(0, 0, 0, 0.03)",
    safe_area_stroke="rgba(0, 0, 0, 0.2)",
    pointer_color="#d62728",
    clearance_stroke="#ff7f0e",
    candidate_stroke="#1f77b4",
    popup_fill="rgba(44, 160, 44, 0.25)",
    popup_stroke="#2ca02c",
    overflow_stroke="#2ca02c",
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#111111",
    title_font_size=20.0,
    stroke_width=1.0,
)
