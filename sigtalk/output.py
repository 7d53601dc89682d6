"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO, Optional, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(ch: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer is taken as a code point."""
    if isinstance(ch, int) and not isinstance(ch, bool):
        ch = chr(ch)
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _target(stream).write(ch)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string as is."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading minus when negative."""
    out = _target(stream)
    if n < 0:
        out.write("-")
        n = -n
    out.write(str(n))