"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; a None string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; a None string writes only the newline."""
    out = _target(stream)
    putstr(s, out)
    putchar("\n", out)


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))


def putstr_lines(lines: Iterable[str], stream: TextIO | None = None) -> None:
    """Write each line followed by a newline, then one closing blank line."""
    out = _target(stream)
    for line in lines:
        putendl("(null)" if line is None else line, out)
    out.write("\n")