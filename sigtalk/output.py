"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to the stream (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text to the stream; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline; None writes nothing at all."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, not {type(number).__name__}")
    _target(stream).write(str(number))