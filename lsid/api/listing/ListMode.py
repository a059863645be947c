"""Listing mode chosen for an operand by the path classifier."""

from enum import Enum


class ListMode(Enum):
    """How an operand is listed without ``-r``."""

    ENUMERATE = "enumerate"
    SINGLE = "single"
