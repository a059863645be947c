"""API module for lsid.

Argument resolution, record formatting and traversal live here; the CLI in
``lsid.cli`` only wires them to typer, stdout and the exit code.
"""

__all__ = []
