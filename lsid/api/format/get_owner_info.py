"""Pick the owner lookup for the running platform."""

import os

from .PlatformOwnerInfo import PlatformOwnerInfo
from .PosixOwnerInfo import PosixOwnerInfo
from .UnavailableOwnerInfo import UnavailableOwnerInfo


def get_owner_info(os_name: str | None = None) -> PlatformOwnerInfo:
    """Return the owner lookup for ``os_name`` (defaults to ``os.name``)."""
    if (os_name or os.name) == "posix":
        return PosixOwnerInfo()
    return UnavailableOwnerInfo()
