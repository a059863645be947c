"""Derive the personality name from ``argv[0]``."""

from pathlib import Path

DEFAULT_NAME = "lsid"


def _invocation_name(argv0: str) -> str:
    """Return the base name of ``argv0`` without a Windows ``.exe`` suffix."""
    name = Path(argv0).name
    if name.lower().endswith(".exe"):
        name = name[: -len(".exe")]
    if not name or name == "__main__.py":
        return DEFAULT_NAME
    return name
