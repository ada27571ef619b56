"""Channel sinks.

A sink receives every decoded record as one begin_record() call followed
by one write_channel() call per channel. Sinks do not swallow their own
errors; a failing sink stops the run.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional

from ..core.channels import ChannelBundle
from .buffers import ChannelBuffers

logger = logging.getLogger(__name__)


class ChannelEmitter(ABC):
    """Destination for decoded channel values."""

    @abstractmethod
    def begin_record(self, timestamp: datetime) -> None:
        """Set the instant for the following channel writes."""

    @abstractmethod
    def write_channel(self, name: str, value: float) -> None:
        """Write one channel value for the current record."""

    def end_record(self) -> None:
        """Called after the last write of a record."""

    def emit(self, timestamp: datetime, bundle: ChannelBundle) -> None:
        """Write a whole bundle in channel order."""
        self.begin_record(timestamp)
        for name, value in bundle.to_dict().items():
            self.write_channel(name, value)
        self.end_record()


class BufferEmitter(ChannelEmitter):
    """Collects records into ChannelBuffers."""

    def __init__(self, buffers: Optional[ChannelBuffers] = None):
        self.buffers = buffers if buffers is not None else ChannelBuffers()
        self._timestamp: Optional[float] = None
        self._values: Dict[str, float] = {}

    def begin_record(self, timestamp: datetime) -> None:
        self._timestamp = timestamp.timestamp()
        self._values = {}

    def write_channel(self, name: str, value: float) -> None:
        if self._timestamp is None:
            raise RuntimeError("write_channel() called before begin_record()")
        self._values[name] = value

    def end_record(self) -> None:
        if self._timestamp is None:
            return
        self.buffers.append(self._timestamp, self._values)
        self._timestamp = None
        self._values = {}


class LoggingEmitter(ChannelEmitter):
    """Logs every write; used for dry runs."""

    def __init__(self, level: int = logging.INFO):
        self.level = level
        self._timestamp: Optional[datetime] = None

    def begin_record(self, timestamp: datetime) -> None:
        self._timestamp = timestamp

    def write_channel(self, name: str, value: float) -> None:
        stamp = self._timestamp.isoformat() if self._timestamp else "-"
        logger.log(self.level, f"{stamp} {name}={value}")


class MultiEmitter(ChannelEmitter):
    """Forwards every call to several sinks in order."""

    def __init__(self, *emitters: ChannelEmitter):
        self.emitters = list(emitters)

    def begin_record(self, timestamp: datetime) -> None:
        for emitter in self.emitters:
            emitter.begin_record(timestamp)

    def write_channel(self, name: str, value: float) -> None:
        for emitter in self.emitters:
            emitter.write_channel(name, value)

    def end_record(self) -> None:
        for emitter in self.emitters:
            emitter.end_record()
