"""Config module - display configuration and argument resolution."""

from ._FLAGS import FLAGS
from ._PROFILES import PROFILES
from .DisplayConfig import DisplayConfig
from .InvalidArgumentError import InvalidArgumentError
from .resolve_arguments import resolve_arguments

__all__ = [
    "FLAGS",
    "PROFILES",
    "DisplayConfig",
    "InvalidArgumentError",
    "resolve_arguments",
]
