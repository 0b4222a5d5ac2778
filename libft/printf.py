"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = (1 << 64) - 1


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return int(value)


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >> 31 else value


def _fmt_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_int(c) & 0xFF)


def _fmt_str(s: Any) -> str:
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def _fmt_nbr(n: Any) -> str:
    return str(_signed32(_int(n)))


def _fmt_unsigned(n: Any) -> str:
    return str(_int(n) & _UINT_MASK)


def _fmt_hex(n: Any, fmt: str) -> str:
    return format(_int(n) & _UINT_MASK, "x" if fmt == "x" else "X")


def _fmt_ptr(n: Any) -> str:
    value = 0 if n is None else _int(n) & _PTR_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _fmt_char,
    "s": _fmt_str,
    "p": _fmt_ptr,
    "d": _fmt_nbr,
    "i": _fmt_nbr,
    "u": _fmt_unsigned,
    "x": lambda n: _fmt_hex(n, "x"),
    "X": lambda n: _fmt_hex(n, "X"),
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text.

    An unknown conversion character is dropped together with its '%',
    and a lone '%' at the end produces nothing.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(remaining, spec)))
    return "".join(pieces)


def _emit(text: str, stream: TextIO | None) -> int:
    _target(stream).write(text)
    return len(text)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered ``fmt`` and return the number of characters written."""
    return _emit(format_printf(fmt, *args), stream)


def print_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character; returns 1."""
    return _emit(_fmt_char(c), stream)


def print_str(s: str | None, stream: TextIO | None = None) -> int:
    """Write ``s``, or "(null)" for None; returns the length written."""
    return _emit(_fmt_str(s), stream)


def print_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` as a 32-bit signed decimal; returns the length written."""
    return _emit(_fmt_nbr(n), stream)


def print_ptr(n: int | None, stream: TextIO | None = None) -> int:
    """Write an address as 0x-prefixed hex, or "(nil)" for zero."""
    return _emit(_fmt_ptr(n), stream)


def print_unsigned(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` as a 32-bit unsigned decimal; returns the length written."""
    return _emit(_fmt_unsigned(n), stream)


def print_hex(n: int, fmt: str, stream: TextIO | None = None) -> int:
    """Write ``n`` as 32-bit hex, lower case for 'x' and upper case otherwise."""
    return _emit(_fmt_hex(n, fmt), stream)