"""Channel sinks and export functionality for MeterView."""

from .buffers import ChannelBuffers
from .emitter import BufferEmitter, ChannelEmitter, LoggingEmitter, MultiEmitter
from .csv_export import export_csv
from .chart_export import export_chart

__all__ = [
    "ChannelBuffers",
    "ChannelEmitter",
    "BufferEmitter",
    "LoggingEmitter",
    "MultiEmitter",
    "export_csv",
    "export_chart",
]
