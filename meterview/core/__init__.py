"""Core data structures and models for MeterView.

ViewerSettings needs Qt and is imported from meterview.core.settings.
"""

from .channels import ALL_CHANNELS, Channel, ChannelBundle
from .statistics import ChannelStatistics, ChannelSummary

__all__ = [
    'ALL_CHANNELS',
    'Channel',
    'ChannelBundle',
    'ChannelStatistics',
    'ChannelSummary',
]
