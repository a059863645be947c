"""Entry point for ``python -m lsid``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main(invoked_as="lsid"))
