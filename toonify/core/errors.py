"""Exception types raised by toonify"""


class ToonifyError(Exception):
    """Base exception for all toonify errors."""

    pass


class InputShapeError(ToonifyError):
    """Raised when a record collection does not have the shape TOON can encode."""

    pass


class EmptyInputError(ToonifyError):
    """Raised when TOON text contains no non-blank lines."""

    pass


class InvalidHeaderError(ToonifyError):
    """Raised when the first TOON line is not a valid header."""

    pass


class ToonifyIOError(ToonifyError):
    """Raised when reading or writing a file fails."""

    pass


class ConfigError(ToonifyError):
    """Raised when a configuration file holds invalid settings."""

    pass
