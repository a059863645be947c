"""Operand resolution error."""

from ..LsidError import LsidError


class PathResolutionError(LsidError):
    """Raised when an operand cannot be stat'ed, read or resolved."""

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"{path}: {error.strerror or error}")
