"""Turn an invocation name and argument list into a display config and operands."""

from collections.abc import Sequence

from ._FLAGS import FLAG_PREFIX, FLAGS
from ._PROFILES import PROFILES
from .DisplayConfig import DisplayConfig
from .InvalidArgumentError import InvalidArgumentError

DEFAULT_OPERAND = "."


def resolve_arguments(invoked_as: str, args: Sequence[str]) -> tuple[DisplayConfig, list[str]]:
    """Resolve display flags and path operands.

    The profile for ``invoked_as`` seeds the config. Leading arguments that
    start with ``-`` are applied as flags in order; scanning stops at the
    first argument without the prefix, and everything from there on is an
    operand.

    Args:
        invoked_as: Base name the program was invoked as (e.g. ``ll``)
        args: Arguments after the program name

    Returns:
        Tuple of (config, operands); operands defaults to ``["."]``

    Raises:
        InvalidArgumentError: If a prefixed argument is not a known flag
    """
    config = DisplayConfig(**PROFILES.get(invoked_as, {}))

    operands = list(args)
    while operands and operands[0].startswith(FLAG_PREFIX):
        token = operands.pop(0)
        update = FLAGS.get(token)
        if update is None:
            raise InvalidArgumentError(token)
        config = config.model_copy(update=update)

    return config, operands or [DEFAULT_OPERAND]
