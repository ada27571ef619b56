"""Viewer window for decoded trace channels."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Dict, Optional

from PySide6 import QtWidgets, QtGui

from ..core import Channel, ChannelStatistics
from ..core.settings import ViewerSettings
from ..emit.buffers import ChannelBuffers
from ..version import __version__, APP_NAME
from .plot_widget import ChannelPlotWidget
from .theme import DARK_THEME, LIGHT_THEME, generate_stylesheet


class ViewerWindow(QtWidgets.QMainWindow):
    """Main window showing all channels of a decoded run."""

    def __init__(self, buffers: ChannelBuffers, settings: Optional[ViewerSettings] = None,
                 title: str = ""):
        super().__init__()
        self.buffers = buffers
        self.settings = settings or ViewerSettings()
        self.theme = DARK_THEME if self.settings.dark_mode else LIGHT_THEME

        self.setWindowTitle(f"{APP_NAME} {__version__}" + (f" - {title}" if title else ""))
        self.resize(1280, 860)
        self.setStyleSheet(generate_stylesheet(self.theme))

        self.plot = ChannelPlotWidget(
            self.theme,
            show_grid=self.settings.show_grid,
            grid_alpha=self.settings.grid_alpha,
            line_width=self.settings.line_width,
            show_crosshair=self.settings.show_crosshair,
        )
        self.setCentralWidget(self.plot)

        self.cursor_label = QtWidgets.QLabel("")
        self.statusBar().addPermanentWidget(self.cursor_label)
        self.plot.cursor_values.connect(self._on_cursor_values)

        self.plot.update_data(buffers)
        self.statusBar().showMessage(self._summary_text())

    def _summary_text(self) -> str:
        if self.buffers.is_empty:
            return "No MeterValues records found"
        stats = ChannelStatistics.from_buffers(self.buffers)
        if stats is None:
            return f"{len(self.buffers)} record"
        return (
            f"{stats.count} records, "
            f"{stats.duration_seconds / 3600:.2f} h, "
            f"{stats.energy_wh / 1000:.3f} kWh imported"
        )

    def _on_cursor_values(self, t: float, values: Dict[Channel, float]) -> None:
        stamp = datetime.fromtimestamp(t, tz=timezone.utc).strftime('%Y-%m-%d %H:%M:%S')
        self.cursor_label.setText(
            f"{stamp}  "
            f"I={values[Channel.CURRENT_IMPORT_L1]:.1f}/{values[Channel.CURRENT_IMPORT_L2]:.1f} A  "
            f"P={values[Channel.POWER_ACTIVE_IMPORT_SUM]:.0f} W"
        )


def show_viewer(buffers: ChannelBuffers, settings: Optional[ViewerSettings] = None,
                title: str = "") -> int:
    """Open the viewer window and run the Qt event loop.

    Returns:
        The Qt application exit code.
    """
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)
    QtGui.QIcon.setThemeName('')

    win = ViewerWindow(buffers, settings, title)
    win.show()
    return app.exec()
