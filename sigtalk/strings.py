"""String helpers that follow NUL-terminated string rules, in Python form.

Searches return an index, or ``None`` where nothing is found. Functions that
fill a destination of limited size return the resulting text together with
the length they report.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

from sigtalk.ctype import isdigit

_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))
_INT_BITS = 32


def _char(ch: Union[str, int]) -> str:
    """Normalise a one-character string or a code point (low 8 bits)."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected str or int, got {type(ch).__name__}")
    return chr(ch & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's complement."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span // 2 else value


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots.

    Returns the text that fits (at most ``size - 1`` characters) and the full
    length of ``src``.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` inside a destination of ``size`` slots.

    Returns the resulting text and the length the operation reports: the
    length of ``src`` plus ``size`` when ``dst`` already fills the space,
    otherwise the sum of both lengths.
    """
    _check_size(size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strncmp(first: str, second: str, size: int) -> int:
    """Compare at most ``size`` characters; the difference of the first
    differing pair, or 0."""
    _check_size(size)
    for a, b in zip_longest(first[:size], second[:size], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strchr(text: str, ch: Union[str, int]) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; the terminator ``"\\0"`` is
    found at ``len(text)``."""
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: Union[str, int]) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; the terminator ``"\\0"`` is
    found at ``len(text)``."""
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, size: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``size``
    characters of ``haystack``. An empty needle is found at 0."""
    _check_size(size)
    if not needle:
        return 0
    index = haystack[:size].find(needle)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. The result wraps to a signed 32-bit value.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    digits = []
    for ch in text[position:]:
        if not isdigit(ch):
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty when
    ``start`` is past the end."""
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    _check_size(length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """``text`` without leading and trailing characters from ``charset``."""
    return text.strip(charset)


def split(text: str, sep: Union[str, int]) -> List[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    separator = _char(sep)
    return [piece for piece in text.split(separator) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string of ``func(index, ch)`` for each character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each element of ``chars`` in place by ``func(index, ch)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)