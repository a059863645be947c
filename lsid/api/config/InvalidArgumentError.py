"""Invalid command-line flag error."""

from ..LsidError import LsidError


class InvalidArgumentError(LsidError):
    """Raised when an argument looks like a flag but is not a recognized one."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid option `{token}`")
