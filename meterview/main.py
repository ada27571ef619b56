"""Command line entry point for MeterView."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core import ChannelStatistics
from .core.settings import ViewerSettings
from .emit import BufferEmitter, ChannelBuffers, LoggingEmitter, MultiEmitter, export_chart, export_csv
from .trace import MalformedTimestamp, TraceProcessor, discover_trace_files
from .version import __version__, APP_NAME, DESCRIPTION

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meterview",
        description=DESCRIPTION,
    )
    parser.add_argument('-t', '--trace-file-directory', required=True, type=Path,
                        help='Directory searched recursively for trace files')
    parser.add_argument('--pattern', default=None,
                        help='Glob pattern for trace files (default: **/*.trace)')
    parser.add_argument('--strict', action='store_true', default=None,
                        help='Abort on a record with a malformed timestamp instead of skipping it')
    parser.add_argument('--csv', type=Path, metavar='FILE',
                        help='Export decoded channels to a CSV file')
    parser.add_argument('--chart', type=Path, metavar='FILE',
                        help='Render decoded channels to a PNG chart')
    parser.add_argument('--summary', action='store_true',
                        help='Print per-channel statistics')
    parser.add_argument('--no-gui', action='store_true',
                        help='Do not open the viewer window')
    parser.add_argument('--dry-run', action='store_true',
                        help='Log every channel write instead of opening the viewer')
    parser.add_argument('--settings', type=Path, metavar='INI',
                        help='Read viewer settings from this INI file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f"{APP_NAME} {__version__}")
    return parser


def run(args: argparse.Namespace, settings: ViewerSettings) -> int:
    """Decode the traces selected by args and hand them to the sinks."""
    pattern = args.pattern or settings.trace_pattern
    strict = settings.strict_timestamps if args.strict is None else args.strict

    buffers = ChannelBuffers()
    emitter = BufferEmitter(buffers)
    if args.dry_run:
        emitter = MultiEmitter(emitter, LoggingEmitter())

    try:
        files = discover_trace_files(args.trace_file_directory, pattern)
        result = TraceProcessor(emitter, strict=strict).process_files(files)
        logger.info(f"Total: {result}")

        if args.csv:
            export_csv(args.csv, buffers, separator=settings.csv_separator)
        if args.chart:
            if buffers.is_empty:
                logger.warning("No records decoded, chart not written")
            else:
                export_chart(args.chart, buffers)
    except (OSError, MalformedTimestamp) as e:
        logger.error(str(e))
        return 1

    if args.summary:
        stats = ChannelStatistics.from_buffers(buffers)
        if stats is None:
            print(f"{len(buffers)} record(s) decoded, not enough for statistics")
        else:
            print(stats.format_table())

    if args.no_gui or args.dry_run:
        return 0

    from .ui import show_viewer
    return show_viewer(buffers, settings, title=str(args.trace_file_directory))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    settings = ViewerSettings.load(args.settings)
    try:
        return run(args, settings)
    except Exception:
        logger.exception("Run aborted")
        return 1


if __name__ == '__main__':
    sys.exit(main())
