"""Log formatter with the compact UTC timestamp used on stderr."""

import logging
import time


class CompactTimestampFormatter(logging.Formatter):
    """Prefix records with ``YYY:MMDD:HHMM`` in UTC.

    The year is printed modulo 1000 and zero padded, so 2026 becomes ``026``.
    """

    def __init__(self, fmt: str = "%(asctime)s %(message)s"):
        super().__init__(fmt)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        t = time.gmtime(record.created)
        return f"{t.tm_year % 1000:03d}:{t.tm_mon:02d}{t.tm_mday:02d}:{t.tm_hour:02d}{t.tm_min:02d}"
