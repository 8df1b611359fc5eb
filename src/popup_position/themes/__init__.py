"""Theme definitions for placement diagrams."""

from popup_position.themes.dark import DARK_THEME
from popup_position.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
