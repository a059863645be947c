"""Content identifier computation error."""

from ..LsidError import LsidError


class HashComputationError(LsidError):
    """Raised when a file cannot be opened or read for hashing."""

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"cannot hash {path}: {error.strerror or error}")
