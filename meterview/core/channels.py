"""Channel names and per-record channel bundles."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Channel(str, Enum):
    """Named scalar channels produced for every MeterValues record."""
    CURRENT_IMPORT_L1 = "current/import/L1"
    CURRENT_IMPORT_L2 = "current/import/L2"
    CURRENT_OFFERED = "current/offered"
    POWER_OFFERED = "power/offered"
    VOLTAGE_L1 = "voltage/L1"
    VOLTAGE_L2 = "voltage/L2"
    VOLTAGE_L3 = "voltage/L3"
    POWER_ACTIVE_IMPORT_L1 = "power/active/import/L1"
    POWER_ACTIVE_IMPORT_L2 = "power/active/import/L2"
    POWER_ACTIVE_IMPORT_L3 = "power/active/import/L3"
    POWER_ACTIVE_IMPORT_SUM = "power/active/import/sum"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human readable series name, e.g. 'Current.Import(L1)'."""
        return CHANNEL_LABELS[self]


CHANNEL_LABELS: Dict[Channel, str] = {
    Channel.CURRENT_IMPORT_L1: "Current.Import(L1)",
    Channel.CURRENT_IMPORT_L2: "Current.Import(L2)",
    Channel.CURRENT_OFFERED: "Current.Offered",
    Channel.POWER_OFFERED: "Power.Offered",
    Channel.VOLTAGE_L1: "Voltage(L1)",
    Channel.VOLTAGE_L2: "Voltage(L2)",
    Channel.VOLTAGE_L3: "Voltage(L3)",
    Channel.POWER_ACTIVE_IMPORT_L1: "Power.Active.Import(L1)",
    Channel.POWER_ACTIVE_IMPORT_L2: "Power.Active.Import(L2)",
    Channel.POWER_ACTIVE_IMPORT_L3: "Power.Active.Import(L3)",
    Channel.POWER_ACTIVE_IMPORT_SUM: "Power.Active.Import(sum)",
}

# Fixed emission order
ALL_CHANNELS = tuple(Channel)


@dataclass
class ChannelBundle:
    """Channel values extracted from one MeterValues record.

    Channels without a matching sampled value stay at 0.0. The sum
    channel is derived from the three active import phases.
    """
    current_import_l1: float = 0.0
    current_import_l2: float = 0.0
    current_offered: float = 0.0
    power_offered: float = 0.0
    voltage_l1: float = 0.0
    voltage_l2: float = 0.0
    voltage_l3: float = 0.0
    power_active_import_l1: float = 0.0
    power_active_import_l2: float = 0.0
    power_active_import_l3: float = 0.0

    @property
    def power_active_import_sum(self) -> float:
        return (
            self.power_active_import_l1
            + self.power_active_import_l2
            + self.power_active_import_l3
        )

    def set(self, channel: Channel, value: float) -> None:
        """Write an extracted channel. The sum channel is read-only."""
        if channel is Channel.POWER_ACTIVE_IMPORT_SUM:
            raise ValueError(f"{channel} is derived and cannot be written")
        setattr(self, _ATTRIBUTES[channel], value)

    def get(self, channel: Channel) -> float:
        return getattr(self, _ATTRIBUTES[channel])

    def to_dict(self) -> Dict[str, float]:
        """Convert bundle to {channel name: value} in emission order."""
        return {channel.value: self.get(channel) for channel in ALL_CHANNELS}

    def __str__(self) -> str:
        return (
            f"ChannelBundle("
            f"I={self.current_import_l1:.2f}/{self.current_import_l2:.2f}, "
            f"V={self.voltage_l1:.1f}/{self.voltage_l2:.1f}/{self.voltage_l3:.1f}, "
            f"P={self.power_active_import_sum:.1f})"
        )


_ATTRIBUTES: Dict[Channel, str] = {
    channel: channel.name.lower() for channel in ALL_CHANNELS
}
