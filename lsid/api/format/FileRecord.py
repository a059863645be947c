"""Snapshot of one visited filesystem entry."""

import os
import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class FileRecord:
    """Path plus link-aware status of a single entry.

    ``stat`` never follows symlinks; ``link_target`` is the raw readlink
    value and is only set for symlinks.
    """

    path: str
    stat: os.stat_result
    link_target: str | None = None

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.stat.st_mode)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.stat.st_mode)

    @property
    def is_regular(self) -> bool:
        return stat.S_ISREG(self.stat.st_mode)
