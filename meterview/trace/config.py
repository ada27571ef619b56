"""Trace file format configuration for MeterView."""

from __future__ import annotations


class TraceConfig:
    """Layout of one trace record line."""
    FIELD_COUNT = 10  # Lines with any other field count are not records
    DATE_FIELD = 0
    TIME_FIELD = 1
    PAYLOAD_FIELD = 9

    # Trace lines carry no zone; they are recorded in UTC
    UTC_SUFFIX = "+00:00"
    TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S %z'

    DEFAULT_PATTERN = "**/*.trace"
    ENCODING = "utf-8"
