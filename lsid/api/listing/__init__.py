"""Listing module - classify operands and traverse directories."""

from .classify_path import classify_path
from .list_directory import list_directory
from .list_path import list_path
from .ListMode import ListMode
from .PathResolutionError import PathResolutionError
from .read_record import read_record
from .walk_tree import walk_tree
from .WalkAction import WalkAction
from .WalkEvent import WalkEvent

__all__ = [
    "ListMode",
    "PathResolutionError",
    "WalkAction",
    "WalkEvent",
    "classify_path",
    "list_directory",
    "list_path",
    "read_record",
    "walk_tree",
]
