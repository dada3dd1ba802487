"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

_UINT32_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1
_NULL_TEXT = "(null)"


def _integer(value: Any, spec: str) -> int:
    if isinstance(value, int):
        return int(value)
    raise TypeError(f"%{spec} expects an integer, not {type(value).__name__}")


def _signed32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, not {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = int(value)
    else:
        address = id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next_arg(values, spec))
    if spec == "s":
        return _string(_next_arg(values, spec))
    if spec in "di":
        return str(_signed32(_integer(_next_arg(values, spec), spec)))
    if spec == "u":
        return str(_integer(_next_arg(values, spec), spec) & _UINT32_MASK)
    if spec in "xX":
        number = _integer(_next_arg(values, spec), spec) & _UINT32_MASK
        return format(number, spec)
    if spec == "p":
        return _pointer(_next_arg(values, spec))
    # Unknown conversions produce nothing and consume no argument.
    return ""


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Expand fmt with args and return the resulting text.

    Integers for %d and %i are taken as 32-bit signed, for %u, %x and %X as
    32-bit unsigned. A None string prints as "(null)". A conversion letter that
    is not recognised is dropped together with its '%', and a lone '%' at the
    end of fmt produces nothing.
    """
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the expansion of fmt to standard output and return its length."""
    if fmt is None:
        return 0
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)