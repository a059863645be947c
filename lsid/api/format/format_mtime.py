"""Compact UTC modification time."""

from datetime import datetime, timezone

MTIME_FORMAT = "%y.%m%d.%H%M"


def format_mtime(mtime: float) -> str:
    """Format a POSIX timestamp as ``YY.MMDD.HHMM`` in UTC."""
    return datetime.fromtimestamp(mtime, tz=timezone.utc).strftime(MTIME_FORMAT)
