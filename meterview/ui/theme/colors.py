"""Theme colors and definitions for MeterView UI."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from ...core.channels import Channel


@dataclass
class ThemeColors:
    """Color palette for a theme."""
    # Backgrounds
    bg_primary: str
    bg_secondary: str

    # Accents
    accent_primary: str

    # Text
    text_primary: str
    text_secondary: str
    text_muted: str

    # Borders
    border_default: str

    # Charts, one pen color per channel
    channels: Dict[Channel, str]

    def channel_color(self, channel: Channel) -> str:
        return self.channels.get(channel, self.text_primary)


# Dark Theme (GitHub-inspired)
DARK_THEME = ThemeColors(
    bg_primary="#0d1117",
    bg_secondary="#161b22",
    accent_primary="#58a6ff",
    text_primary="#f0f6fc",
    text_secondary="#8b949e",
    text_muted="#484f58",
    border_default="#30363d",
    channels={
        Channel.CURRENT_IMPORT_L1: "#f85149",
        Channel.CURRENT_IMPORT_L2: "#d29922",
        Channel.CURRENT_OFFERED: "#8b949e",
        Channel.POWER_OFFERED: "#8b949e",
        Channel.VOLTAGE_L1: "#f85149",
        Channel.VOLTAGE_L2: "#d29922",
        Channel.VOLTAGE_L3: "#58a6ff",
        Channel.POWER_ACTIVE_IMPORT_L1: "#f85149",
        Channel.POWER_ACTIVE_IMPORT_L2: "#d29922",
        Channel.POWER_ACTIVE_IMPORT_L3: "#58a6ff",
        Channel.POWER_ACTIVE_IMPORT_SUM: "#3fb950",
    },
)

# Light Theme
LIGHT_THEME = ThemeColors(
    bg_primary="#f8fafc",
    bg_secondary="#ffffff",
    accent_primary="#2563eb",
    text_primary="#0f172a",
    text_secondary="#475569",
    text_muted="#94a3b8",
    border_default="#cbd5e1",
    channels={
        Channel.CURRENT_IMPORT_L1: "#dc2626",
        Channel.CURRENT_IMPORT_L2: "#ca8a04",
        Channel.CURRENT_OFFERED: "#475569",
        Channel.POWER_OFFERED: "#475569",
        Channel.VOLTAGE_L1: "#dc2626",
        Channel.VOLTAGE_L2: "#ca8a04",
        Channel.VOLTAGE_L3: "#2563eb",
        Channel.POWER_ACTIVE_IMPORT_L1: "#dc2626",
        Channel.POWER_ACTIVE_IMPORT_L2: "#ca8a04",
        Channel.POWER_ACTIVE_IMPORT_L3: "#2563eb",
        Channel.POWER_ACTIVE_IMPORT_SUM: "#16a34a",
    },
)


def generate_stylesheet(theme: ThemeColors) -> str:
    """Generate Qt stylesheet from theme colors."""
    return f"""
QMainWindow {{
    background-color: {theme.bg_primary};
}}

QStatusBar {{
    background-color: {theme.bg_secondary};
    color: {theme.text_secondary};
    border-top: 1px solid {theme.border_default};
}}

QLabel {{
    color: {theme.text_primary};
}}
"""
