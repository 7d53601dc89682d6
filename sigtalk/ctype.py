"""ASCII-only character classification and case conversion.

Each function takes either a one-character string or an integer code point.
Classification functions return a bool. Conversion functions return a value
of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(ch: Char) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected str or int, got {type(ch).__name__}")
    return ch


def _like(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def isalpha(ch: Char) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(ch)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(ch: Char) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(ch) <= ord("9")


def isalnum(ch: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(ch) or isdigit(ch)


def isascii(ch: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(ch) <= 127


def isprint(ch: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(ch) <= 126


def toupper(ch: Char) -> Char:
    """Convert an ASCII lower-case letter to upper case; leave others alone."""
    code = _code(ch)
    if ord("a") <= code <= ord("z"):
        return _like(ch, code ^ 0x20)
    return ch


def tolower(ch: Char) -> Char:
    """Convert an ASCII upper-case letter to lower case; leave others alone."""
    code = _code(ch)
    if ord("A") <= code <= ord("Z"):
        return _like(ch, code ^ 0x20)
    return ch