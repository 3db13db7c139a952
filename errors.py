"""Error taxonomy for Line Filter.

Every failure the core raises derives from LineFilterError so the CLI can
report it and choose an exit code in one place.
"""

from pathlib import Path
from typing import Union


PathLike = Union[str, Path]


class LineFilterError(RuntimeError):
    """Base class for all Line Filter failures."""


class MissingInputError(LineFilterError, ValueError):
    """Raised when no input files were supplied."""

    def __init__(self, message: str = "You need to specify at least one file to filter."):
        super().__init__(message)


class UnreadableInputError(LineFilterError):
    """Raised when a file to be read (an input or a category file) cannot be opened or read."""

    def __init__(self, path: PathLike, reason: str = ""):
        self.path = Path(path)
        message = f"Cannot read file {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnwritableOutputError(LineFilterError):
    """Raised when a category file cannot be created or written."""

    def __init__(self, path: PathLike, reason: str = ""):
        self.path = Path(path)
        message = f"Cannot write output file {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedNumericDataError(LineFilterError, ValueError):
    """Raised when a persisted integers/floats file holds a non-numeric line."""

    def __init__(self, path: PathLike, line_number: int, line: str):
        self.path = Path(path)
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"{self.path}:{line_number}: cannot parse {line!r} as a number"
        )


__all__ = [
    "LineFilterError",
    "MissingInputError",
    "UnreadableInputError",
    "UnwritableOutputError",
    "MalformedNumericDataError",
]
