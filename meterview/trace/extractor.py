"""Projection of MeterValues sampled values onto named channels."""

from __future__ import annotations
import re
from typing import Any, Optional

from ..core.channels import Channel, ChannelBundle
from .models import Measurand, MeterValuesRequest, Phase, SampledValue

# Plain decimal or exponent notation, plus inf/nan; no surrounding
# whitespace and no digit-group underscores
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _as_float(v: Any) -> float:
    """Parse a sampled value, falling back to 0.0 when it is not numeric."""
    if isinstance(v, bool):
        return 0.0
    if isinstance(v, str) and _NUMBER.fullmatch(v):
        return float(v)
    if isinstance(v, (int, float)):
        try:
            return float(v)
        except OverflowError:
            return 0.0
    return 0.0


def channel_for(measurand: Optional[Measurand], phase: Optional[Phase]) -> Optional[Channel]:
    """Channel written by a (measurand, phase) pair, or None if ignored.

    Covers every Measurand member so the table stays complete when the
    enumeration grows.
    """
    if measurand is None or measurand is Measurand.OTHER:
        return None

    if measurand is Measurand.CURRENT_IMPORT:
        if phase is Phase.L1:
            return Channel.CURRENT_IMPORT_L1
        if phase is Phase.L2:
            return Channel.CURRENT_IMPORT_L2
        return None

    if measurand is Measurand.CURRENT_OFFERED:
        return Channel.CURRENT_OFFERED

    if measurand is Measurand.POWER_OFFERED:
        return Channel.POWER_OFFERED

    if measurand is Measurand.POWER_ACTIVE_IMPORT:
        return {
            Phase.L1: Channel.POWER_ACTIVE_IMPORT_L1,
            Phase.L2: Channel.POWER_ACTIVE_IMPORT_L2,
            Phase.L3: Channel.POWER_ACTIVE_IMPORT_L3,
        }.get(phase)

    if measurand is Measurand.VOLTAGE:
        return {
            Phase.L1: Channel.VOLTAGE_L1,
            Phase.L2: Channel.VOLTAGE_L2,
            Phase.L3: Channel.VOLTAGE_L3,
        }.get(phase)

    raise AssertionError(f"unhandled measurand {measurand!r}")


def apply_sampled_value(bundle: ChannelBundle, sampled: SampledValue) -> Optional[Channel]:
    """Write one sampled value into the bundle; returns the channel written."""
    channel = channel_for(sampled.measurand, sampled.phase)
    if channel is not None:
        bundle.set(channel, _as_float(sampled.value))
    return channel


def extract_channels(message: MeterValuesRequest) -> ChannelBundle:
    """Extract the channel bundle of one MeterValues request.

    Sampled values are visited in message order, so a repeated
    (measurand, phase) pair keeps the last value seen.
    """
    bundle = ChannelBundle()
    for meter_value in message.meter_value:
        for sampled in meter_value.sampled_value:
            apply_sampled_value(bundle, sampled)
    return bundle
