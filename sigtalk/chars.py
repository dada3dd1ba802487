"""Character classification and case conversion restricted to ASCII."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(char: CharLike) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(char: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(char)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(char: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(char) <= 127


def is_print(char: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(char) <= 126


def to_upper(char: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else is returned unchanged, in the same kind."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(char, code)


def to_lower(char: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else is returned unchanged, in the same kind."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(char, code)