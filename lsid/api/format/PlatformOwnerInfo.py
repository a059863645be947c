"""Base class for owner lookups."""

import os
from abc import ABC, abstractmethod

UNAVAILABLE = (-1, -1)


class PlatformOwnerInfo(ABC):
    """Extract numeric ownership from a status result."""

    @abstractmethod
    def owner(self, st: os.stat_result) -> tuple[int, int]:
        """Return ``(uid, gid)`` for ``st``, or ``(-1, -1)`` if unknown."""
