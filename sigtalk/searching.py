"""Searching and comparing strings and byte sequences."""

from __future__ import annotations

from itertools import islice
from typing import Optional


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")


def find_substring(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of the first needle lying wholly within the first limit characters.

    An empty needle is found at 0; otherwise None when there is no match.
    """
    _check_limit(limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first char in text; the terminator "\\0" is found at the end."""
    _check_char(char)
    index = (text + "\0").find(char)
    return None if index < 0 else index


def find_last_char(text: str, char: str) -> Optional[int]:
    """Index of the last char in text; the terminator "\\0" is found at the end."""
    _check_char(char)
    index = (text + "\0").rfind(char)
    return None if index < 0 else index


def compare(first: str, second: str, limit: int) -> int:
    """Compare at most limit characters.

    Returns the code difference of the first pair that differs, or 0.
    """
    _check_limit(limit)
    pairs = islice(zip(first + "\0", second + "\0"), limit)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def compare_bytes(first: bytes, second: bytes, limit: int) -> int:
    """Compare the first limit bytes; returns the difference of the first unequal pair, or 0."""
    _check_limit(limit)
    if limit > len(first) or limit > len(second):
        raise ValueError("limit exceeds the length of the data")
    for a, b in zip(first[:limit], second[:limit]):
        if a != b:
            return a - b
    return 0


def find_byte(data: bytes, value: int, limit: int) -> Optional[int]:
    """Index of the first byte equal to value (taken modulo 256) in the first limit bytes."""
    _check_limit(limit)
    if limit > len(data):
        raise ValueError("limit exceeds the length of the data")
    index = data.find(value & 0xFF, 0, limit)
    return None if index < 0 else index