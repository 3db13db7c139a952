"""Line classifier deciding which category a line belongs to.

The rule is checked top-to-bottom, first match wins:

1. Integer: ``-?[0-9]+``
2. Float:   ``-?[0-9]+\\.[0-9]+([Ee]-?[0-9]*)?``
3. String:  anything else

Both numeric grammars must cover the whole line and only accept ASCII
digits. They are checked character by character, without ``re``.
"""

from contracts import Category


DIGITS = frozenset("0123456789")
EXPONENT_MARKERS = frozenset("Ee")


def _skip_digits(line: str, pos: int) -> int:
    """Return the index of the first non-digit at or after pos."""
    end = len(line)
    while pos < end and line[pos] in DIGITS:
        pos += 1
    return pos


def _scan_signed_digits(line: str) -> int:
    """Match ``-?[0-9]+`` at the start of line.

    Returns:
        Index just past the digits, or -1 if there are none
    """
    start = 1 if line.startswith("-") else 0
    pos = _skip_digits(line, start)
    return pos if pos > start else -1


def is_integer(line: str) -> bool:
    """True if the whole line is an optionally negative run of digits."""
    return _scan_signed_digits(line) == len(line)


def is_float(line: str) -> bool:
    """True if the whole line is a decimal with an optional exponent part."""
    pos = _scan_signed_digits(line)
    if pos < 0 or pos >= len(line) or line[pos] != ".":
        return False

    fraction_start = pos + 1
    pos = _skip_digits(line, fraction_start)
    if pos == fraction_start:
        return False
    if pos == len(line):
        return True

    # Exponent: marker, optional minus, any number of digits
    if line[pos] not in EXPONENT_MARKERS:
        return False
    pos += 1
    if pos < len(line) and line[pos] == "-":
        pos += 1
    return _skip_digits(line, pos) == len(line)


def is_string(line: str) -> bool:
    """True if the line is neither an integer nor a float."""
    return not is_integer(line) and not is_float(line)


def classify_line(line: str) -> Category:
    """Classify a single line (without its terminator)."""
    if is_integer(line):
        return Category.INTEGER
    if is_float(line):
        return Category.FLOAT
    return Category.STRING
