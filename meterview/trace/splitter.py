"""Splitting raw trace text into record lines."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import TraceConfig

logger = logging.getLogger(__name__)

# Every whitespace character is a delimiter on its own, so runs of
# whitespace produce empty fields and change the field count.
_FIELD_SEPARATOR = re.compile(r"\s")


@dataclass(frozen=True)
class TraceLine:
    """One candidate record: a line with exactly FIELD_COUNT fields."""
    fields: Tuple[str, ...]
    line_number: int = 0  # 1-based within its source
    source: Optional[str] = None

    @property
    def date(self) -> str:
        return self.fields[TraceConfig.DATE_FIELD]

    @property
    def time(self) -> str:
        return self.fields[TraceConfig.TIME_FIELD]

    @property
    def payload(self) -> str:
        return self.fields[TraceConfig.PAYLOAD_FIELD]

    @property
    def location(self) -> str:
        """'source:line' for log messages."""
        return f"{self.source or '<text>'}:{self.line_number}"


def split_lines(text: str) -> Iterator[str]:
    """Lazily split text on newline characters."""
    start = 0
    while True:
        end = text.find("\n", start)
        if end < 0:
            yield text[start:]
            return
        yield text[start:end]
        start = end + 1


def split_fields(line: str) -> List[str]:
    """Split a line on each whitespace character."""
    return _FIELD_SEPARATOR.split(line)


def parse_line(line: str, line_number: int = 0,
               source: Optional[str] = None) -> Optional[TraceLine]:
    """Parse one line into a TraceLine.

    Returns:
        The record, or None if the line does not have exactly
        FIELD_COUNT fields (headers, truncated or blank lines).
    """
    parts = split_fields(line)
    if len(parts) != TraceConfig.FIELD_COUNT:
        return None
    return TraceLine(tuple(parts), line_number, source)


def iter_records(lines: Iterable[str], source: Optional[str] = None) -> Iterator[TraceLine]:
    """Yield the candidate records among lines, dropping all other shapes."""
    for number, line in enumerate(lines, start=1):
        record = parse_line(line, number, source)
        if record is None:
            logger.debug(f"{source or '<text>'}:{number}: not a record, skipped")
            continue
        yield record
