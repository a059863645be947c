"""Create the lsid Typer CLI app."""

import typer

from lsid.api.listing.list_path import list_path
from lsid.api.listing.PathResolutionError import PathResolutionError
from lsid.utils.get_logger import get_logger

logger = get_logger("cli")

HELP = """List file metadata.

Usage: [FLAGS]... [PATH]...

Leading flags select columns: -r recursive, -m mode, -o owner, -s size,
-t mtime, -c content id, -l symlink+mode+size, -1 name only. Flags must
come before any PATH. With no PATH the current directory is listed.
"""


def _create_app() -> typer.Typer:
    """Create and configure the lsid Typer app.

    The command takes no arguments of its own: ``main`` resolves flags and
    operands from the raw argument list and hands them over in ``ctx.obj``
    as ``config`` and ``operands``.
    """
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        add_completion=False,
    )

    @app.command(help=HELP, context_settings={"help_option_names": ["--help"]})
    def listing(ctx: typer.Context) -> None:
        config = ctx.obj["config"]

        failed = False
        for operand in ctx.obj["operands"]:
            try:
                list_path(operand, config, typer.echo)
            except PathResolutionError as e:
                logger.error("%s", e)
                failed = True

        if failed:
            raise typer.Exit(1)

    return app
