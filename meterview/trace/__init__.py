"""Trace decoding package for MeterView."""

from .config import TraceConfig
from .splitter import TraceLine, iter_records, split_fields, split_lines
from .timestamps import MalformedTimestamp, resolve_timestamp
from .models import Measurand, MeterValuesRequest, Phase
from .decoder import decode_meter_values
from .extractor import extract_channels
from .reader import TraceReadError, discover_trace_files, iter_trace_lines, read_trace_lines
from .processor import ProcessResult, TraceProcessor

__all__ = [
    "TraceConfig",
    "TraceLine",
    "iter_records",
    "split_fields",
    "split_lines",
    "MalformedTimestamp",
    "resolve_timestamp",
    "Measurand",
    "MeterValuesRequest",
    "Phase",
    "decode_meter_values",
    "extract_channels",
    "TraceReadError",
    "discover_trace_files",
    "iter_trace_lines",
    "read_trace_lines",
    "ProcessResult",
    "TraceProcessor",
]
