"""Router module for line classification and routing."""

from .classifier import classify_line, is_integer, is_float, is_string
from .reader import read_lines
from .router import LineRouter, route_files

__all__ = [
    "classify_line",
    "is_integer",
    "is_float",
    "is_string",
    "read_lines",
    "LineRouter",
    "route_files",
]
