"""Exceptions raised by chromaramp."""


class ChromarampError(Exception):
    """Base class for every error raised by this package."""


class InvalidColorError(ChromarampError, ValueError):
    """A color could not be decoded or quantised (bad hex, NaN channel...)."""

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class ConfigParseError(ChromarampError, ValueError):
    """An imported palette configuration is structurally invalid."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
