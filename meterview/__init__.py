"""MeterView application package."""

from .version import __version__, __version_info__, APP_NAME
from .core import Channel, ChannelBundle, ChannelStatistics
from .trace import TraceProcessor, decode_meter_values, extract_channels
from .emit import ChannelBuffers, ChannelEmitter

__all__ = [
    "__version__",
    "__version_info__",
    "APP_NAME",
    "Channel",
    "ChannelBundle",
    "ChannelStatistics",
    "TraceProcessor",
    "decode_meter_values",
    "extract_channels",
    "ChannelBuffers",
    "ChannelEmitter",
]
