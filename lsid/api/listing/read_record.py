"""Build a FileRecord from the filesystem."""

import os
import stat

from ..format.FileRecord import FileRecord


def read_record(path: str, st: os.stat_result | None = None) -> FileRecord:
    """Snapshot ``path`` without following symlinks.

    Args:
        path: Entry to read
        st: Status already obtained with ``os.lstat``; stat'ed here if None

    Raises:
        OSError: If the entry cannot be stat'ed or its link cannot be read
    """
    if st is None:
        st = os.lstat(path)
    link_target = os.readlink(path) if stat.S_ISLNK(st.st_mode) else None
    return FileRecord(path=path, stat=st, link_target=link_target)
