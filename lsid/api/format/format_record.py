"""Render a FileRecord as one tab-separated line."""

import os
import stat

from ...utils.get_logger import get_logger
from ..config.DisplayConfig import DisplayConfig
from .file_content_id import file_content_id
from .FileRecord import FileRecord
from .format_mtime import format_mtime
from .get_owner_info import get_owner_info
from .group_thousands import group_thousands
from .HashComputationError import HashComputationError
from .PlatformOwnerInfo import PlatformOwnerInfo

logger = get_logger("format")

SEPARATOR = "\t"


def _escape(path: str) -> str:
    return path.replace("\t", "\\\t")


def _size(record: FileRecord) -> str:
    if record.is_dir:
        return "dir"
    if record.is_symlink:
        return "symlink"
    return group_thousands(record.stat.st_size)


def format_record(
    record: FileRecord,
    config: DisplayConfig,
    owner_info: PlatformOwnerInfo | None = None,
) -> str:
    """Build the listing line for ``record``.

    Columns, each only when enabled, in this order: path (``/`` appended for
    directories), ``symlink:``, ``mode:``, ``owner:``, ``size:``, ``mtime:``,
    ``cid:``. A file that cannot be hashed is logged and its line is
    returned without the ``cid:`` column.

    Args:
        record: Entry to render
        config: Active display configuration
        owner_info: Owner lookup; defaults to the one for this platform

    Returns:
        The line, without a trailing newline
    """
    name = _escape(record.path)
    if record.is_dir:
        name += os.sep
    fields = [name]

    if config.show_symlink and record.is_symlink:
        fields.append(f"symlink:{record.link_target}")

    if config.show_mode:
        fields.append(f"mode:{stat.S_IMODE(record.stat.st_mode) & 0o777:04o}")

    if config.show_owner:
        uid, gid = (owner_info or get_owner_info()).owner(record.stat)
        fields.append(f"owner:{uid}/{gid}")

    if config.show_size:
        fields.append(f"size:{_size(record)}")

    if config.show_time:
        fields.append(f"mtime:{format_mtime(record.stat.st_mtime)}")

    if config.show_cid and record.is_regular:
        try:
            fields.append(f"cid:{file_content_id(record.path)}")
        except HashComputationError as e:
            logger.error("%s", e)

    return SEPARATOR.join(fields)
