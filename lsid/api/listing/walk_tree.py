"""Depth-first walk that reports errors as values."""

import os
import stat
from collections.abc import Callable

from .WalkAction import WalkAction
from .WalkEvent import WalkEvent


def _children(path: str) -> list[WalkEvent]:
    events = []
    with os.scandir(path) as it:
        for entry in it:
            try:
                events.append(WalkEvent(entry.path, entry.stat(follow_symlinks=False)))
            except OSError as e:
                events.append(WalkEvent(entry.path, error=e))
    return events


def walk_tree(root: str, visitor: Callable[[WalkEvent], WalkAction]) -> None:
    """Visit ``root`` and everything below it, depth first, parents first.

    Symlinks are visited but never descended into. Entries within a
    directory come in the order the platform returns them. Errors below the
    root never raise: they reach ``visitor`` as events with ``error`` set
    and the walk moves on. A visitor returning ``WalkAction.SKIP`` for a
    directory prunes its children.

    Raises:
        OSError: If ``root`` itself cannot be stat'ed
    """
    stack = [WalkEvent(root, os.lstat(root))]
    while stack:
        event = stack.pop()
        action = visitor(event)
        if event.error is not None or action is WalkAction.SKIP:
            continue
        if not stat.S_ISDIR(event.stat.st_mode):
            continue
        try:
            children = _children(event.path)
        except OSError as e:
            visitor(WalkEvent(event.path, event.stat, e))
            continue
        stack.extend(reversed(children))
