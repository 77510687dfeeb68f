"""Exceptions raised by charstat."""


class CharstatError(Exception):
    """Base class for charstat failures."""


class InputError(CharstatError):
    """The named input could not be opened for reading."""

    def __init__(self, path, reason):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
