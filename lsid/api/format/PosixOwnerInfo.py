"""Owner lookup on POSIX platforms."""

import os

from .PlatformOwnerInfo import PlatformOwnerInfo


class PosixOwnerInfo(PlatformOwnerInfo):
    def owner(self, st: os.stat_result) -> tuple[int, int]:
        return st.st_uid, st.st_gid
