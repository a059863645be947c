import logging
import os
import sys

from .CompactTimestampFormatter import CompactTimestampFormatter

# Prevent multiple configurations
_CONFIGURED = False

DEFAULT_LEVEL = logging.INFO


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that always writes to the current ``sys.stderr``."""

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def _level_from_env() -> int:
    name = os.environ.get("LSID_LOG_LEVEL", "").strip().upper()
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else DEFAULT_LEVEL


def configure_logging(level: int | None = None) -> None:
    """Configure lsid diagnostics on stderr.

    Args:
        level: Logging level. If None, derived from ``LSID_LOG_LEVEL`` (default INFO).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("lsid")
    root_logger.setLevel(level if level is not None else _level_from_env())

    handler = _StderrHandler()
    handler.setFormatter(CompactTimestampFormatter())
    root_logger.addHandler(handler)

    _CONFIGURED = True
