"""Owner lookup for platforms without POSIX ownership."""

import os

from .PlatformOwnerInfo import UNAVAILABLE, PlatformOwnerInfo


class UnavailableOwnerInfo(PlatformOwnerInfo):
    def owner(self, st: os.stat_result) -> tuple[int, int]:
        return UNAVAILABLE
