"""UI package for MeterView."""

from .main_window import ViewerWindow, show_viewer
from .plot_widget import ChannelPlotWidget
from .theme import ThemeColors, DARK_THEME, LIGHT_THEME, generate_stylesheet

__all__ = [
    "ViewerWindow",
    "show_viewer",
    "ChannelPlotWidget",
    "ThemeColors",
    "DARK_THEME",
    "LIGHT_THEME",
    "generate_stylesheet",
]
