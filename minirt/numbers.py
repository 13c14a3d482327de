"""Validation and conversion of the numeric fields of a scene file."""

from __future__ import annotations

import math

from minirt.vector import Vector

_DIGITS = frozenset("0123456789")


def _at(text: str, index: int) -> str:
    """Character at ``index``, or an empty string past the end."""
    return text[index] if 0 <= index < len(text) else ""


def _is_digit(char: str) -> bool:
    return char in _DIGITS


def _scan(text: str, start: int, stops: str, dots: int = 0) -> tuple[int, int] | None:
    """Check one number starting at ``start`` up to a stop character.

    Returns the index where scanning stopped and the dot count, or None when
    the text is not a valid number.
    """
    index = start
    while (char := _at(text, index)) and char not in stops:
        if char == "-" and _is_digit(_at(text, index + 1)):
            index += 1
            char = _at(text, index)
        if not _is_digit(char):
            if char == "." and _is_digit(_at(text, index + 1)):
                dots += 1
                if dots > 1:
                    return None
                index += 1
            else:
                return None
        index += 1
    return index, dots


def parse_double(text: str) -> float:
    """Read a decimal number; anything unreadable yields 0.0.

    Leading spaces are skipped, an optional minus sign must be followed by a
    digit, and reading stops at the first character that does not belong.
    """
    stripped = text.lstrip(" ")
    negative = stripped.startswith("-")
    if negative:
        if not _is_digit(_at(stripped, 1)):
            return 0.0
        stripped = stripped[1:]

    whole = 0.0
    rest = stripped
    while rest and _is_digit(rest[0]):
        whole = whole * 10 + int(rest[0])
        rest = rest[1:]

    fraction = 0.0
    count = 0
    if rest.startswith("."):
        for char in rest[1:]:
            if not _is_digit(char):
                break
            fraction = fraction * 10 + int(char)
            count += 1

    try:
        scale = 10.0 ** count
    except OverflowError:
        scale = math.inf
    value = whole + fraction / scale
    return -value if negative else value


def is_valid_double(text: str) -> bool:
    """True when ``text`` (up to a newline) is a well-formed number."""
    return _scan(text, 0, "\n") is not None


def is_valid_vector(text: str) -> bool:
    """True when ``text`` looks like three comma-separated numbers.

    The first character after each comma is taken as given and not checked.
    """
    start = 0
    for count in range(3):
        scanned = _scan(text, start, ",\n")
        if scanned is None:
            return False
        index, _ = scanned
        if _at(text, index) in ("", "\n"):
            break
        start = index + 2
    else:
        count = 3
    return count == 2


def parse_vector(text: str) -> Vector:
    """Convert ``x,y,z`` into a Vector; missing components are 0.0."""
    parts = [part for part in text.split(",") if part]
    values = [parse_double(part) for part in parts[:3]]
    values.extend([0.0] * (3 - len(values)))
    return Vector(*values)