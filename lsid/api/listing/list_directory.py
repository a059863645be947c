"""List the immediate children of a directory."""

import os
from collections.abc import Callable

from ...utils.get_logger import get_logger
from ..config.DisplayConfig import DisplayConfig
from ..format.format_record import format_record
from ..format.PlatformOwnerInfo import PlatformOwnerInfo
from .PathResolutionError import PathResolutionError
from .read_record import read_record

logger = get_logger("listing")


def list_directory(
    path: str,
    config: DisplayConfig,
    emit: Callable[[str], None],
    owner_info: PlatformOwnerInfo | None = None,
) -> None:
    """Emit one line per child of ``path``, not ``path`` itself.

    Children come in platform order. A child that cannot be stat'ed is
    logged and skipped.

    Raises:
        PathResolutionError: If the directory cannot be read
    """
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        raise PathResolutionError(path, e) from e

    for entry in entries:
        try:
            record = read_record(entry.path, entry.stat(follow_symlinks=False))
        except OSError as e:
            logger.error("%s", e)
            continue
        emit(format_record(record, config, owner_info))
