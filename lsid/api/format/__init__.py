"""Format module - render one listing line per file."""

from .content_id import content_id
from .file_content_id import file_content_id
from .FileRecord import FileRecord
from .format_mtime import format_mtime
from .format_record import format_record
from .get_owner_info import get_owner_info
from .group_thousands import group_thousands
from .HashComputationError import HashComputationError
from .PlatformOwnerInfo import PlatformOwnerInfo
from .PosixOwnerInfo import PosixOwnerInfo
from .UnavailableOwnerInfo import UnavailableOwnerInfo

__all__ = [
    "FileRecord",
    "HashComputationError",
    "PlatformOwnerInfo",
    "PosixOwnerInfo",
    "UnavailableOwnerInfo",
    "content_id",
    "file_content_id",
    "format_mtime",
    "format_record",
    "get_owner_info",
    "group_thousands",
]
