"""Bit-level framing of text: eight bits per byte, most significant first,
closed by a zero byte."""

from __future__ import annotations

from typing import Iterator, Optional

BITS_PER_BYTE = 8


def encode_bits(text: str) -> Iterator[int]:
    """Yield the bits of text's UTF-8 bytes, high bit first, then eight zero bits."""
    for byte in text.encode("utf-8"):
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1
    yield from (0 for _ in range(BITS_PER_BYTE))


class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """How many bits of the current byte have been received."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight bits are in, otherwise None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = ((self._value << 1) | int(bit)) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte