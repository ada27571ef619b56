"""Sequential trace processing: lines in, channel writes out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Tuple

from ..core.channels import ChannelBundle
from ..emit.emitter import ChannelEmitter
from .decoder import decode_meter_values
from .extractor import extract_channels
from .reader import read_trace_lines
from .splitter import TraceLine, iter_records, split_lines
from .timestamps import MalformedTimestamp, resolve_timestamp

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Counters of one processing run."""
    lines: int = 0
    records: int = 0  # Lines with the record field count
    emitted: int = 0
    bad_timestamp: int = 0
    not_meter_values: int = 0

    @property
    def skipped(self) -> int:
        return self.bad_timestamp + self.not_meter_values

    def merge(self, other: 'ProcessResult') -> None:
        self.lines += other.lines
        self.records += other.records
        self.emitted += other.emitted
        self.bad_timestamp += other.bad_timestamp
        self.not_meter_values += other.not_meter_values

    def __str__(self) -> str:
        return (
            f"{self.lines} lines, {self.records} records, {self.emitted} emitted, "
            f"{self.bad_timestamp} bad timestamps, "
            f"{self.not_meter_values} other messages"
        )


class TraceProcessor:
    """Decodes trace records and forwards their channels to an emitter.

    Records are handled strictly in input order, one at a time. Bad
    timestamps and non-MeterValues payloads skip the record. In strict
    mode a bad timestamp raises MalformedTimestamp instead. Emitter
    errors always propagate.
    """

    def __init__(self, emitter: ChannelEmitter, strict: bool = False):
        self.emitter = emitter
        self.strict = strict

    def decode_record(self, record: TraceLine,
                      result: Optional[ProcessResult] = None) -> Optional[Tuple[datetime, ChannelBundle]]:
        """Resolve one record to (timestamp, bundle), or None to skip it."""
        try:
            timestamp = resolve_timestamp(record.date, record.time)
        except MalformedTimestamp as e:
            if self.strict:
                raise MalformedTimestamp(f"{record.location}: {e}") from e
            logger.debug(f"{record.location}: {e}, skipped")
            if result is not None:
                result.bad_timestamp += 1
            return None

        message = decode_meter_values(record.payload)
        if message is None:
            if result is not None:
                result.not_meter_values += 1
            return None

        return timestamp, extract_channels(message)

    def process_lines(self, lines: Iterable[str], source: Optional[str] = None) -> ProcessResult:
        """Process raw trace lines."""
        result = ProcessResult()

        def counted(items):
            for item in items:
                result.lines += 1
                yield item

        for record in iter_records(counted(lines), source):
            result.records += 1
            decoded = self.decode_record(record, result)
            if decoded is None:
                continue
            timestamp, bundle = decoded
            self.emitter.emit(timestamp, bundle)
            result.emitted += 1

        return result

    def process_text(self, text: str) -> ProcessResult:
        """Process the full text of a trace."""
        return self.process_lines(split_lines(text))

    def process_files(self, paths: Iterable[Path]) -> ProcessResult:
        """Process trace files in order.

        Raises:
            TraceReadError: If a file cannot be read
        """
        total = ProcessResult()
        for path in paths:
            result = self.process_lines(read_trace_lines(path), source=str(path))
            logger.info(f"{path}: {result}")
            total.merge(result)
        return total
