"""One entry delivered to a walk visitor."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class WalkEvent:
    """A visited path with its link-aware status, or the error that hit it.

    A directory that is visited fine but cannot be read is delivered a second
    time with ``error`` set.
    """

    path: str
    stat: os.stat_result | None = None
    error: OSError | None = None
