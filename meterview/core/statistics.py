"""Statistical summary of decoded channels."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, TYPE_CHECKING
import statistics as stats_module

from .channels import ALL_CHANNELS, Channel

if TYPE_CHECKING:
    from ..emit.buffers import ChannelBuffers


@dataclass
class ChannelSummary:
    """Min/max/avg/std of one channel."""
    channel: Channel
    count: int
    minimum: float
    maximum: float
    average: float
    std: float

    @classmethod
    def from_values(cls, channel: Channel, values: List[float]) -> 'ChannelSummary':
        return cls(
            channel=channel,
            count=len(values),
            minimum=min(values),
            maximum=max(values),
            average=stats_module.mean(values),
            std=stats_module.stdev(values) if len(values) > 1 else 0.0,
        )


@dataclass
class ChannelStatistics:
    """Statistical summary of a decoded trace run."""
    count: int
    duration_seconds: float
    channels: Dict[Channel, ChannelSummary]
    energy_wh: float

    @classmethod
    def from_buffers(cls, buffers: 'ChannelBuffers') -> 'ChannelStatistics | None':
        """Calculate statistics from buffered channel samples."""
        if len(buffers) < 2:
            return None

        timestamps = buffers.timestamps
        duration = timestamps[-1] - timestamps[0]

        summaries = {
            channel: ChannelSummary.from_values(channel, buffers.get_channel(channel))
            for channel in ALL_CHANNELS
        }

        # Trapezoidal integration of the summed active import power
        # Negative power (export) is not counted as imported energy
        powers = buffers.get_channel(Channel.POWER_ACTIVE_IMPORT_SUM)
        energy_ws = 0.0
        for i in range(1, len(timestamps)):
            dt = timestamps[i] - timestamps[i-1]
            avg_power = max(0.0, (powers[i] + powers[i-1]) / 2)
            energy_ws += avg_power * dt

        return cls(
            count=len(buffers),
            duration_seconds=duration,
            channels=summaries,
            energy_wh=energy_ws / 3600,
        )

    def format_table(self) -> str:
        """Render a plain-text summary table."""
        lines = [
            f"Records: {self.count}  Duration: {_format_duration(self.duration_seconds)}  "
            f"Energy: {self.energy_wh:.3f} Wh",
            f"{'channel':<26}{'min':>12}{'max':>12}{'avg':>12}{'std':>12}",
        ]
        for channel, s in self.channels.items():
            lines.append(
                f"{channel.value:<26}{s.minimum:>12.3f}{s.maximum:>12.3f}"
                f"{s.average:>12.3f}{s.std:>12.3f}"
            )
        return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Format duration in human-readable format."""
    if seconds < 60:
        return f"{seconds:.1f} seconds"
    elif seconds < 3600:
        return f"{seconds / 60:.1f} minutes"
    else:
        return f"{seconds / 3600:.2f} hours"
