"""List a single path operand."""

import os
from collections.abc import Callable

from ...utils.get_logger import get_logger
from ..config.DisplayConfig import DisplayConfig
from ..format.format_record import format_record
from ..format.get_owner_info import get_owner_info
from ..format.PlatformOwnerInfo import PlatformOwnerInfo
from .classify_path import classify_path
from .list_directory import list_directory
from .ListMode import ListMode
from .PathResolutionError import PathResolutionError
from .read_record import read_record
from .walk_tree import walk_tree
from .WalkAction import WalkAction
from .WalkEvent import WalkEvent

logger = get_logger("listing")


def _walk(path: str, config: DisplayConfig, emit: Callable[[str], None], owner_info: PlatformOwnerInfo) -> None:
    def visit(event: WalkEvent) -> WalkAction:
        if event.error is not None:
            logger.error("%s", event.error)
            return WalkAction.SKIP
        try:
            record = read_record(event.path, event.stat)
        except OSError as e:
            logger.error("%s", e)
            return WalkAction.SKIP
        emit(format_record(record, config, owner_info))
        return WalkAction.CONTINUE

    try:
        walk_tree(path, visit)
    except OSError as e:
        raise PathResolutionError(path, e) from e


def list_path(
    operand: str,
    config: DisplayConfig,
    emit: Callable[[str], None],
    owner_info: PlatformOwnerInfo | None = None,
) -> None:
    """List ``operand`` according to ``config``.

    With ``config.recursive`` the whole subtree is walked, root included,
    without following symlinks; a symlink operand is therefore printed as a
    single entry. Otherwise a directory (or a symlink to one) has its
    immediate children listed and anything else is printed on its own.

    Args:
        operand: Path as given on the command line
        config: Active display configuration
        emit: Called with each output line as soon as it is built
        owner_info: Owner lookup; defaults to the one for this platform

    Raises:
        PathResolutionError: If the operand itself cannot be resolved or read
    """
    path = os.path.abspath(operand)
    owner_info = owner_info or get_owner_info()

    if config.recursive:
        _walk(path, config, emit, owner_info)
        return

    if classify_path(path) is ListMode.ENUMERATE:
        list_directory(path, config, emit, owner_info)
        return

    try:
        record = read_record(path)
    except OSError as e:
        raise PathResolutionError(path, e) from e
    emit(format_record(record, config, owner_info))
