"""Channel data buffers for decoded time series."""

from __future__ import annotations
import math
from typing import Dict, List, Mapping, Tuple
import numpy as np

from ..core.channels import ALL_CHANNELS, Channel, ChannelBundle


class ChannelBuffers:
    """Append-only storage for all channels of a run.

    Uses Python lists for O(1) append and builds numpy arrays lazily for
    plotting and export. Records sharing a timestamp are all kept; trace
    times only have one-second resolution.
    """

    def __init__(self):
        self._timestamps: List[float] = []  # Absolute timestamps (unix time)
        self._values: Dict[Channel, List[float]] = {c: [] for c in ALL_CHANNELS}

        # Cached numpy arrays (invalidated on append)
        self._cache_valid = False
        self._np_ts: np.ndarray = np.array([])
        self._np_values: Dict[Channel, np.ndarray] = {}

    def append(self, t: float, values: Mapping[str, float]) -> None:
        """Append one record. Channels missing from values are stored as 0.0.

        The sum channel is always derived from the three active import
        phases; a supplied sum must agree with them.

        Raises:
            ValueError: If values names an unknown channel or carries a
                sum that differs from L1+L2+L3
        """
        unknown = [name for name in values if name not in _BY_NAME]
        if unknown:
            raise ValueError(f"Unknown channel(s): {', '.join(unknown)}")

        bundle = ChannelBundle()
        for name, value in values.items():
            channel = _BY_NAME[name]
            if channel is not Channel.POWER_ACTIVE_IMPORT_SUM:
                bundle.set(channel, float(value))

        supplied = values.get(Channel.POWER_ACTIVE_IMPORT_SUM.value)
        if supplied is not None and not math.isclose(
                float(supplied), bundle.power_active_import_sum, abs_tol=1e-9):
            raise ValueError(
                f"{Channel.POWER_ACTIVE_IMPORT_SUM} = {supplied} does not match "
                f"phase total {bundle.power_active_import_sum}"
            )

        self._timestamps.append(t)
        for name, value in bundle.to_dict().items():
            self._values[_BY_NAME[name]].append(value)
        self._cache_valid = False

    def clear(self) -> None:
        """Clear all buffers."""
        self._timestamps.clear()
        for series in self._values.values():
            series.clear()
        self._cache_valid = False
        self._np_ts = np.array([])
        self._np_values = {}

    @property
    def is_empty(self) -> bool:
        return len(self._timestamps) == 0

    def __len__(self) -> int:
        return len(self._timestamps)

    def _ensure_cache(self) -> None:
        """Build numpy cache if needed."""
        if self._cache_valid:
            return
        self._np_ts = np.array(self._timestamps, dtype=np.float64)
        self._np_values = {
            channel: np.array(series, dtype=np.float64)
            for channel, series in self._values.items()
        }
        self._cache_valid = True

    def get_arrays(self) -> Tuple[np.ndarray, Dict[Channel, np.ndarray]]:
        """Get timestamps and per-channel values as numpy arrays."""
        self._ensure_cache()
        return self._np_ts, self._np_values

    def get_channel(self, channel: Channel | str) -> List[float]:
        """Values of one channel, by Channel or channel name."""
        return self._values[Channel(channel)]

    def get_time_range(self) -> Tuple[float, float]:
        """Get first and last timestamp."""
        if not self._timestamps:
            return (0.0, 0.0)
        return (self._timestamps[0], self._timestamps[-1])

    @property
    def timestamps(self) -> List[float]:
        return self._timestamps


_BY_NAME = {channel.value: channel for channel in ALL_CHANNELS}
