"""Decide whether an operand is listed by its contents or as itself."""

import os
import stat

from ...utils.get_logger import get_logger
from .ListMode import ListMode
from .PathResolutionError import PathResolutionError

logger = get_logger("listing")


def classify_path(path: str) -> ListMode:
    """Classify an absolute ``path`` for a non-recursive listing.

    Directories are enumerated. A symlink is followed exactly one level: a
    relative target is joined to the link's directory, and the target is
    stat'ed without following it further. Only a link whose direct target is
    a directory is enumerated, so a chain of links or a link into its own
    ancestors never expands.

    Raises:
        PathResolutionError: If any stat or readlink fails
    """
    try:
        st = os.lstat(path)
        if stat.S_ISLNK(st.st_mode):
            target = os.readlink(path)
            if not os.path.isabs(target):
                target = os.path.normpath(os.path.join(os.path.dirname(path), target))
            is_dir = stat.S_ISDIR(os.lstat(target).st_mode)
        else:
            is_dir = stat.S_ISDIR(st.st_mode)
    except OSError as e:
        raise PathResolutionError(path, e) from e

    mode = ListMode.ENUMERATE if is_dir else ListMode.SINGLE
    logger.debug("classified %s as %s", path, mode.value)
    return mode
