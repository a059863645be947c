"""Verdicts a walk visitor returns to steer the tree walk."""

from enum import Enum


class WalkAction(Enum):
    """Visitor verdict for a walked entry."""

    CONTINUE = "continue"
    # do not descend into this entry
    SKIP = "skip"
