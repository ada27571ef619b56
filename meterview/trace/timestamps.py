"""Record timestamp resolution."""

from __future__ import annotations
from datetime import datetime

from .config import TraceConfig


class MalformedTimestamp(ValueError):
    """Date and time fields do not form a valid UTC timestamp."""


def resolve_timestamp(date: str, time: str) -> datetime:
    """Combine a record's date and time fields into an aware UTC datetime.

    Args:
        date: Date field, 'YYYY-MM-DD'
        time: Time field, 'HH:MM:SS'

    Returns:
        Timezone-aware datetime with UTC offset.

    Raises:
        MalformedTimestamp: If the combined string is empty or does not
            match TraceConfig.TIMESTAMP_FORMAT.
    """
    if not date or not time:
        raise MalformedTimestamp(f"empty date or time field ({date!r}, {time!r})")

    date_time = f"{date} {time} {TraceConfig.UTC_SUFFIX}"
    try:
        return datetime.strptime(date_time, TraceConfig.TIMESTAMP_FORMAT)
    except ValueError as e:
        raise MalformedTimestamp(f"invalid timestamp {date_time!r}: {e}") from e
