"""Line reading shared by the router and the statistics loader."""

from pathlib import Path
from typing import Iterator

from errors import UnreadableInputError


def read_lines(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a text file without their terminators.

    Newlines are universal: ``\\n``, ``\\r\\n`` and ``\\r`` all end a line.
    The file is closed once the iterator is exhausted or raises.

    Raises:
        UnreadableInputError: If the file cannot be opened, read or decoded
    """
    try:
        with open(path, "r", encoding=encoding) as handle:
            for raw in handle:
                yield raw[:-1] if raw.endswith("\n") else raw
    except FileNotFoundError as e:
        raise UnreadableInputError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableInputError(path, str(e)) from e
