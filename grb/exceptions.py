"""Exception types raised by the grb package."""


class GrbError(Exception):
    """Base class for every error raised by grb."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class OutOfRangeError(GrbError, IndexError):
    """An index or position lies outside the bounds of a container."""


class InvalidArgumentError(GrbError, ValueError):
    """An argument is incompatible with the operation, e.g. mismatched shapes."""