"""CSV export of decoded channels."""

from __future__ import annotations
from datetime import datetime, timezone
from pathlib import Path
import csv
import logging

from ..core.channels import ALL_CHANNELS
from .buffers import ChannelBuffers

logger = logging.getLogger(__name__)


def export_csv(filepath: Path, buffers: ChannelBuffers, separator: str = ',') -> int:
    """Export all buffered records to a CSV file.

    One row per record: ISO-8601 UTC timestamp followed by every channel
    in emission order.

    Returns:
        Number of data rows written.
    """
    columns = [buffers.get_channel(channel) for channel in ALL_CHANNELS]

    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f, delimiter=separator)
        writer.writerow(['Timestamp'] + [channel.value for channel in ALL_CHANNELS])
        for row, t in enumerate(buffers.timestamps):
            stamp = datetime.fromtimestamp(t, tz=timezone.utc).isoformat()
            writer.writerow([stamp] + [f"{column[row]:.6f}" for column in columns])

    logger.info(f"Exported {len(buffers)} records to {filepath}")
    return len(buffers)
