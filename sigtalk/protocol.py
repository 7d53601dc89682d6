"""The bit protocol carried by SIGUSR1 and SIGUSR2.

Each byte travels as nine signals. The first eight carry the bits of the
character, least significant first: SIGUSR1 for 0 and SIGUSR2 for 1. The
ninth signal tells the receiver to emit the byte, whatever its value.
Bytes are taken as signed chars, so a byte of 128 or more is sent as the
magnitude of its signed value.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

BITS_PER_CHAR = 9
DATA_BITS = 8


def _signed_char(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value


def _char_value(ch: Union[str, int]) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        code = ord(ch)
        if code > 0xFF:
            raise ValueError(f"character {ch!r} does not fit in one byte")
        return _signed_char(code)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected str or int, got {type(ch).__name__}")
    if not -0x80 <= ch <= 0xFF:
        raise ValueError(f"byte value out of range: {ch}")
    return _signed_char(ch)


def _halve(value: int) -> int:
    """Divide by two, rounding toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def encode_char(ch: Union[str, int]) -> List[int]:
    """The nine bits (0 or 1) that send one byte."""
    value = _char_value(ch)
    bits = []
    for _ in range(BITS_PER_CHAR):
        bits.append(0 if value % 2 == 0 else 1)
        value = _halve(value)
    return bits


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """The bits that send ``message``; sending stops at the first NUL byte.

    A string is sent as its UTF-8 bytes.
    """
    data = (
        message.encode("utf-8", "surrogateescape")
        if isinstance(message, str)
        else bytes(message)
    )
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from encode_char(byte)


class Decoder:
    """Collects received bits and yields a byte every ninth bit."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the finished byte on the ninth, else None."""
        if self._count == DATA_BITS:
            byte = self._value & 0xFF
            self._value = 0
            self._count = 0
            return byte
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        return None