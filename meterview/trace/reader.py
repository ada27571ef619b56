"""Trace file discovery and reading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from .config import TraceConfig
from .splitter import split_lines

logger = logging.getLogger(__name__)


class TraceReadError(OSError):
    """A trace file could not be read; the run cannot continue without it."""


def discover_trace_files(directory: Path, pattern: str = TraceConfig.DEFAULT_PATTERN) -> List[Path]:
    """Find trace files below a directory.

    Args:
        directory: Root directory to search
        pattern: Glob pattern relative to directory

    Returns:
        Matching files in sorted order.

    Raises:
        FileNotFoundError: If directory does not exist
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Trace directory not found: {directory}")

    files = sorted(p for p in directory.glob(pattern) if p.is_file())
    logger.info(f"Found {len(files)} trace file(s) in {directory} matching {pattern}")
    return files


def read_trace_lines(path: Path) -> Iterator[str]:
    """Yield the lines of one trace file.

    The whole file is read before the first line is yielded, so no handle
    stays open while lines are processed.

    Raises:
        TraceReadError: If the file cannot be read or decoded
    """
    try:
        text = Path(path).read_text(encoding=TraceConfig.ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise TraceReadError(f"Could not read file `{path}`: {e}") from e

    logger.debug(f"Read {len(text)} characters from {path}")
    yield from split_lines(text)


def iter_trace_lines(paths: Iterable[Path]) -> Iterator[str]:
    """Chain the lines of several trace files in order."""
    for path in paths:
        yield from read_trace_lines(path)
