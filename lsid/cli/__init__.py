"""CLI - main entry point."""

import sys

VERSION_LITERAL = "version"
HELP_OPTION = "--help"


def main(argv: list[str] | None = None, invoked_as: str | None = None) -> int:
    """Main CLI entry point.

    Flags are resolved here from the raw argument list so the typer app never
    reinterprets them; the app only receives the resolved config and operands.

    Args:
        argv: Arguments after the program name; defaults to ``sys.argv[1:]``
        invoked_as: Personality name; defaults to the base name of ``sys.argv[0]``

    Returns:
        Process exit code
    """
    import typer

    from lsid.api.config.InvalidArgumentError import InvalidArgumentError
    from lsid.api.config.resolve_arguments import resolve_arguments
    from lsid.cli._create_app import _create_app
    from lsid.cli._invocation_name import _invocation_name
    from lsid.utils.configure_logging import configure_logging
    from lsid.utils.get_logger import get_logger

    if argv is None:
        argv = sys.argv[1:]
    if invoked_as is None:
        invoked_as = _invocation_name(sys.argv[0])

    if argv == [VERSION_LITERAL]:
        from lsid.utils.get_package_version import get_package_version

        typer.echo(get_package_version())
        return 0

    configure_logging()

    obj: dict = {"invoked_as": invoked_as}
    app_args: list[str] = []
    if argv[:1] == [HELP_OPTION]:
        app_args = [HELP_OPTION]
    else:
        try:
            obj["config"], obj["operands"] = resolve_arguments(invoked_as, argv)
        except InvalidArgumentError as e:
            get_logger("cli").error("%s", e)
            return 1

    app = _create_app()
    try:
        code = app(app_args, prog_name=invoked_as, obj=obj, standalone_mode=False)
    except typer.Exit as e:
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return code if isinstance(code, int) else 0
