"""Calculate the content identifier of a file."""

import hashlib

from .content_id import content_id
from .HashComputationError import HashComputationError

CHUNK_SIZE = 1024 * 1024


def file_content_id(path: str) -> str:
    """Hash the full contents of ``path`` and return its CIDv1.

    Raises:
        HashComputationError: If the file cannot be opened or read
    """
    hasher = hashlib.sha256()
    try:
        with open(path, "rb") as fh:
            for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
                hasher.update(chunk)
    except OSError as e:
        raise HashComputationError(path, e) from e
    return content_id(hasher.digest())
