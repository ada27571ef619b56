"""Viewer settings with persistence."""

from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional
from PySide6.QtCore import QSettings

from ..version import APP_NAME


@dataclass
class ViewerSettings:
    """Viewer and run settings."""
    # Theme
    dark_mode: bool = True

    # Display
    show_grid: bool = True
    grid_alpha: float = 0.2  # Grid opacity 0-1
    show_crosshair: bool = True
    line_width: float = 2.0

    # Traces
    trace_pattern: str = "**/*.trace"
    strict_timestamps: bool = False  # Malformed timestamps abort the run

    # Export
    csv_separator: str = ","

    @staticmethod
    def _open(path: Optional[Path]) -> QSettings:
        if path is not None:
            return QSettings(str(path), QSettings.Format.IniFormat)
        return QSettings(APP_NAME, APP_NAME)

    def save(self, path: Optional[Path] = None) -> None:
        """Save settings to persistent storage.

        Without an explicit path QSettings picks the platform location:
        - Linux: ~/.config/MeterView/MeterView.conf
        - Windows: Registry HKEY_CURRENT_USER\\Software\\MeterView
        - macOS: ~/Library/Preferences/com.MeterView.plist

        Args:
            path: Optional INI file to use instead of the platform location.
        """
        settings = self._open(path)
        for f in fields(self):
            settings.setValue(f.name, getattr(self, f.name))
        settings.sync()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'ViewerSettings':
        """Load settings from persistent storage.

        Returns default settings for keys that are missing or unreadable.
        """
        instance = cls()  # Start with defaults
        settings = cls._open(path)

        for f in fields(instance):
            if not settings.contains(f.name):
                continue
            stored = settings.value(f.name)
            default_val = getattr(instance, f.name)

            try:
                # Type conversion based on default value type
                if isinstance(default_val, bool):
                    # QSettings stores bools as strings in INI files
                    if isinstance(stored, bool):
                        value = stored
                    elif isinstance(stored, str):
                        value = stored.lower() in ('true', '1', 'yes')
                    else:
                        value = bool(stored)
                elif isinstance(default_val, int):
                    value = int(stored)
                elif isinstance(default_val, float):
                    value = float(stored)
                else:
                    value = str(stored)
            except (TypeError, ValueError):
                continue
            setattr(instance, f.name, value)

        return instance
