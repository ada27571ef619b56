"""Three-panel channel plot widget."""

from __future__ import annotations
from typing import Dict, List, Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt, Signal

from ..core.channels import Channel
from ..emit.buffers import ChannelBuffers
from ..emit.chart_export import CHART_PANELS
from .theme import ThemeColors


class ChannelPlotWidget(pg.GraphicsLayoutWidget):
    """Current, voltage and power panels on a shared UTC time axis.

    Features:
        - One curve per channel with legend
        - All panels pan and zoom together
        - Crosshair with value lookup on hover
    """

    # Emitted when the cursor hovers over data (unix time, {channel: value})
    cursor_values = Signal(float, object)

    def __init__(self, theme: ThemeColors, show_grid: bool = True, grid_alpha: float = 0.2,
                 line_width: float = 2.0, show_crosshair: bool = True, parent=None):
        super().__init__(parent)
        self.theme = theme
        self.setBackground(theme.bg_secondary)

        self._show_grid = show_grid
        self._grid_alpha = grid_alpha
        self._line_width = line_width
        self._show_crosshair = show_crosshair

        self.plots: List[pg.PlotItem] = []
        self.curves: Dict[Channel, pg.PlotDataItem] = {}
        self._crosshair_lines: List[pg.InfiniteLine] = []
        self._current_ts: np.ndarray = np.array([])
        self._current_values: Dict[Channel, np.ndarray] = {}

        self._setup_plots()
        self._setup_crosshair()
        self.setMouseTracking(True)

    def _setup_plots(self) -> None:
        """Create one plot panel per channel group."""
        pg.setConfigOptions(antialias=True)

        for row, (title, channels) in enumerate(CHART_PANELS):
            plot = self.addPlot(
                row=row, col=0, title=title,
                axisItems={'bottom': pg.DateAxisItem(utcOffset=0)},
            )
            plot.addLegend(offset=(10, 10))
            self._style_plot(plot)

            for channel in channels:
                width = self._line_width * 1.5 if channel is Channel.POWER_ACTIVE_IMPORT_SUM else self._line_width
                curve = plot.plot(
                    pen=pg.mkPen(self.theme.channel_color(channel), width=width),
                    name=channel.label,
                )
                curve.setClipToView(True)  # Only render visible points
                self.curves[channel] = curve

            if self.plots:
                plot.setXLink(self.plots[0])
            plot.setMouseEnabled(x=True, y=False)
            plot.enableAutoRange(axis='y', enable=True)
            self.plots.append(plot)

    def _style_plot(self, plot: pg.PlotItem) -> None:
        """Apply theme styling to a plot panel."""
        plot.showGrid(x=self._show_grid, y=self._show_grid, alpha=self._grid_alpha)
        for axis in ('left', 'bottom'):
            plot.getAxis(axis).setTextPen(self.theme.text_primary)
            plot.getAxis(axis).setPen(self.theme.border_default)
        plot.setTitle(plot.titleLabel.text, color=self.theme.text_secondary, size='11pt')
        plot.getViewBox().setBackgroundColor(self.theme.bg_secondary)

    def _setup_crosshair(self) -> None:
        """Setup crosshair lines for value display on hover."""
        pen = pg.mkPen(color=self.theme.text_muted, width=1, style=Qt.DashLine)

        for plot in self.plots:
            vline = pg.InfiniteLine(angle=90, movable=False, pen=pen)
            vline.setVisible(False)
            plot.addItem(vline, ignoreBounds=True)
            self._crosshair_lines.append(vline)

        self.scene().sigMouseMoved.connect(self._on_mouse_moved)

    def _on_mouse_moved(self, pos) -> None:
        """Handle mouse move for crosshair."""
        if not self._show_crosshair:
            return

        for plot in self.plots:
            if plot.sceneBoundingRect().contains(pos):
                x = plot.getViewBox().mapSceneToView(pos).x()
                for vline in self._crosshair_lines:
                    vline.setPos(x)
                    vline.setVisible(True)
                self._emit_cursor_values(x)
                return

        # Mouse outside plots - hide crosshair
        for vline in self._crosshair_lines:
            vline.setVisible(False)

    def _emit_cursor_values(self, x: float) -> None:
        """Find and emit channel values nearest to the cursor."""
        idx = nearest_index(self._current_ts, x)
        if idx is None:
            return
        values = {channel: float(arr[idx]) for channel, arr in self._current_values.items()}
        self.cursor_values.emit(float(self._current_ts[idx]), values)

    def update_data(self, buffers: ChannelBuffers) -> None:
        """Show all buffered records."""
        if buffers.is_empty:
            return

        ts, values = buffers.get_arrays()
        self._current_ts = ts
        self._current_values = values

        for channel, curve in self.curves.items():
            curve.setData(ts, values[channel])

        t_start, t_end = buffers.get_time_range()
        if t_end > t_start:
            self.plots[0].setXRange(t_start, t_end, padding=0.02)

    def clear_data(self) -> None:
        """Clear all plot data."""
        for curve in self.curves.values():
            curve.setData([], [])
        self._current_ts = np.array([])
        self._current_values = {}


def nearest_index(xs: np.ndarray, x: float) -> Optional[int]:
    """Index of the sample in sorted xs closest to x, or None if empty."""
    if len(xs) == 0:
        return None

    idx = int(np.searchsorted(xs, x))
    if idx >= len(xs):
        return len(xs) - 1
    if idx > 0 and abs(xs[idx-1] - x) < abs(xs[idx] - x):
        return idx - 1
    return idx
