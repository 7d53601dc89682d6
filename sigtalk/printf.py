"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_INT_SPAN = 1 << 32
_ADDRESS_MASK = (1 << 64) - 1


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


def _signed32(value: Any) -> int:
    value = _integer(value) % _INT_SPAN
    return value - _INT_SPAN if value >= _INT_SPAN // 2 else value


def _unsigned32(value: Any) -> int:
    return _integer(value) % _INT_SPAN


def format_number(n: int) -> str:
    """Decimal text of ``n``, with a leading minus when negative."""
    n = _integer(n)
    return "-" + str(-n) if n < 0 else str(n)


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative ``n``, without prefix."""
    n = _integer(n)
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    if n == 0:
        return "0"
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while n:
        out.append(digits[n % 16])
        n >>= 4
    return "".join(reversed(out))


def format_address(n: int) -> str:
    """An address in lower-case hexadecimal with a ``0x`` prefix."""
    return "0x" + format_hex(n)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": lambda value: format_number(_signed32(value)),
    "i": lambda value: format_number(_signed32(value)),
    "u": lambda value: format_number(_unsigned32(value)),
    "x": lambda value: format_hex(_unsigned32(value)),
    "X": lambda value: format_hex(_unsigned32(value), upper=True),
    "p": lambda value: format_address(_integer(value) & _ADDRESS_MASK),
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    return converter(value)


def sformat(fmt: str, *args: Any) -> str:
    """Format ``args`` by ``fmt`` and return the text.

    Unknown conversions produce nothing and consume no argument; a ``%`` at
    the very end is dropped.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default) and return
    the number of characters written."""
    text = sformat(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)