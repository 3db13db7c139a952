"""Loading category files back into typed value lists."""

import sys
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, TypeVar

import numpy as np

from contracts import Category, FilterJob
from errors import MalformedNumericDataError
from router import is_integer, is_float, read_lines


logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    """Lift the int/str conversion digit limit for the duration of the block.

    Integer lines have no length limit, so neither parsing nor printing them
    may hit the interpreter default of 4300 digits.
    """
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def parse_integer(line: str) -> int:
    """Parse an integer line. Raises ValueError if it is not ``-?[0-9]+``."""
    if not is_integer(line):
        raise ValueError(f"not an integer: {line!r}")
    with unlimited_int_digits():
        return int(line)


def parse_float(line: str) -> np.float32:
    """Parse a float line into a single-precision value.

    An exponent marker without digits (``1.5E``, ``1.5e-``) counts as
    exponent zero.
    """
    if not is_float(line):
        raise ValueError(f"not a float: {line!r}")
    text = line.rstrip("-")
    if text[-1] in "Ee":
        text = text[:-1]
    return np.float32(float(text))


def _load(path: Path, parse: Callable[[str], T], encoding: str) -> List[T]:
    values: List[T] = []
    for number, line in enumerate(read_lines(path, encoding), start=1):
        try:
            values.append(parse(line))
        except ValueError as e:
            raise MalformedNumericDataError(path, number, line) from e
    return values


def load_integers(path: Path, encoding: str = "utf-8") -> List[int]:
    return _load(path, parse_integer, encoding)


def load_floats(path: Path, encoding: str = "utf-8") -> List[np.float32]:
    return _load(path, parse_float, encoding)


def load_strings(path: Path, encoding: str = "utf-8") -> List[str]:
    return list(read_lines(path, encoding))


_LOADERS = {
    Category.INTEGER: load_integers,
    Category.FLOAT: load_floats,
    Category.STRING: load_strings,
}


def load_category(job: FilterJob, category: Category) -> list:
    """Load one category file of a job.

    Returns:
        Parsed values in file order; empty if the file does not exist

    Raises:
        MalformedNumericDataError: If a numeric file holds an unparsable line
        UnreadableInputError: If the file exists but cannot be read
    """
    path = job.output_path(category)
    if not path.exists():
        logger.debug("No %s file at %s", category.value, path)
        return []

    values = _LOADERS[category](path, job.encoding)
    logger.debug("Loaded %d %s from %s", len(values), category.value, path)
    return values
