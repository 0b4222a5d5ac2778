"""Character and string classification helpers (ASCII only)."""

from __future__ import annotations

from collections.abc import Callable, Sequence

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: str | int) -> int:
    """Return the integer code of a single character or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def isspace(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    return chr(_code(c)) in _WHITESPACE if 0 <= _code(c) < 0x110000 else False


def isalnum_string(s: str) -> bool:
    """True when every character of ``s`` is an ASCII letter or digit."""
    return all(isalnum(ch) for ch in s)


def isalpha_string(s: str) -> bool:
    """True when ``s``, after one optional leading '+', holds only ASCII letters."""
    if s.startswith("+"):
        s = s[1:]
    return all(isalpha(ch) for ch in s)


def iterate(s: str, f: Callable[[str, int], object]) -> bool:
    """Call ``f(s, i)`` for each position; stop and return False on a falsy result."""
    return all(f(s, i) for i in range(len(s)))


def iterate_double(
    rows: Sequence[str], f: Callable[[Sequence[str], int, int], object]
) -> bool:
    """Call ``f(rows, i, j)`` for every character of every row; False on a falsy result."""
    return all(
        f(rows, i, j) for i, row in enumerate(rows) for j in range(len(row))
    )