"""Static PNG chart of decoded channels."""

from __future__ import annotations
from datetime import datetime, timezone
from pathlib import Path
import logging

from ..core.channels import Channel
from .buffers import ChannelBuffers

logger = logging.getLogger(__name__)

# Downsample if too many points (for rendering time)
MAX_CHART_POINTS = 5000

CHART_PANELS = [
    ('Current [A]', [
        Channel.CURRENT_IMPORT_L1,
        Channel.CURRENT_IMPORT_L2,
        Channel.CURRENT_OFFERED,
    ]),
    ('Voltage [V]', [
        Channel.VOLTAGE_L1,
        Channel.VOLTAGE_L2,
        Channel.VOLTAGE_L3,
    ]),
    ('Power [W]', [
        Channel.POWER_OFFERED,
        Channel.POWER_ACTIVE_IMPORT_L1,
        Channel.POWER_ACTIVE_IMPORT_L2,
        Channel.POWER_ACTIVE_IMPORT_L3,
        Channel.POWER_ACTIVE_IMPORT_SUM,
    ]),
]


def export_chart(filepath: Path, buffers: ChannelBuffers, dpi: int = 150) -> None:
    """Render current, voltage and power panels to a PNG file.

    Raises:
        ValueError: If there is nothing to plot
    """
    if buffers.is_empty:
        raise ValueError("No records to plot")

    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend
    import matplotlib.pyplot as plt
    import matplotlib.dates as mdates

    ts, values = buffers.get_arrays()
    step = max(1, len(ts) // MAX_CHART_POINTS)
    times = [datetime.fromtimestamp(t, tz=timezone.utc) for t in ts[::step]]

    fig, axes = plt.subplots(len(CHART_PANELS), 1, figsize=(11, 9), sharex=True)
    fig.patch.set_facecolor('white')

    for ax, (title, channels) in zip(axes, CHART_PANELS):
        for channel in channels:
            width = 2.0 if channel is Channel.POWER_ACTIVE_IMPORT_SUM else 1.2
            ax.plot(times, values[channel][::step], linewidth=width, label=channel.label)
        ax.set_ylabel(title, fontsize=10, fontweight='bold')
        ax.grid(True, alpha=0.4, linestyle='-', linewidth=0.5)
        ax.legend(loc='upper right', fontsize=8)

    axes[-1].set_xlabel('Time [UTC]', fontsize=10)
    axes[-1].xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m-%d\n%H:%M:%S'))

    plt.tight_layout()
    fig.savefig(filepath, format='png', dpi=dpi, bbox_inches='tight',
                facecolor='white', edgecolor='none')
    plt.close(fig)
    logger.info(f"Chart written to {filepath}")
