"""Splitting, trimming, slicing, joining and per-character mapping of text."""

from __future__ import annotations

from typing import Callable, Optional


def _check_char(char: str, what: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"{what} must be a single character, got {char!r}")


def split(text: str, separator: str) -> list[str]:
    """Split text on a single separator character, dropping empty pieces."""
    _check_char(separator, "separator")
    return [word for word in text.split(separator) if word]


def strtrim(text: Optional[str], chars: str) -> str:
    """Remove every leading and trailing character found in chars.

    None or empty text gives an empty string.
    """
    if not text:
        return ""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    pieces = []
    for index, char in enumerate(text):
        mapped = func(index, char)
        _check_char(mapped, "mapped value")
        pieces.append(mapped)
    return "".join(pieces)


def for_each_indexed(text: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, char) for every character of text, in order."""
    for index, char in enumerate(text):
        func(index, char)