"""Theme package for MeterView UI."""

from .colors import ThemeColors, DARK_THEME, LIGHT_THEME, generate_stylesheet

__all__ = [
    "ThemeColors",
    "DARK_THEME",
    "LIGHT_THEME",
    "generate_stylesheet",
]
