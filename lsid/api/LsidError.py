"""Base error for lsid."""


class LsidError(Exception):
    """Base class for every error raised by lsid."""
