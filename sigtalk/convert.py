"""Conversion between integers and their decimal text."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading spaces and the control characters tab through carriage return
    are skipped, one optional sign is accepted, and digits are read until
    the first character that is not one. Text with no digits gives 0.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    value = 0
    while position < length and "0" <= text[position] <= "9":
        value = value * 10 + (ord(text[position]) - ord("0"))
        position += 1
    return sign * value


def itoa(number: int) -> str:
    """Return the decimal text of an integer, with a leading '-' when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, not {type(number).__name__}")
    digits = str(abs(number))
    return "-" + digits if number < 0 else digits