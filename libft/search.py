"""Searching and comparing strings."""

from __future__ import annotations

_NUL = "\0"


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _code_at(s: str, i: int) -> int:
    """Code of ``s[i]``, or 0 for the position just past the end."""
    return ord(s[i]) if i < len(s) else 0


def strchr(s: str | None, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL matches the end of the string."""
    c = _single(c)
    if s is None:
        return None
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == _NUL else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL matches the end of the string."""
    c = _single(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strcmp(s1: str | None, s2: str | None) -> int:
    """Difference of the first differing characters, 0 if equal, 404 if either is None."""
    if s1 is None or s2 is None:
        return 404
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    i = min(len(s1), len(s2))
    return _code_at(s1, i) - _code_at(s2, i)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, returning the difference where they part."""
    if n == 0:
        return 0
    for i, (a, b) in enumerate(zip(s1, s2)):
        if a != b or i >= n - 1:
            return ord(a) - ord(b)
    i = min(len(s1), len(s2))
    return _code_at(s1, i) - _code_at(s2, i)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``."""
    if not little:
        return 0
    if length == 0:
        return None
    index = big[:length].find(little)
    return index if index >= 0 else None


def strstr(s1: str, s2: str) -> bool:
    """True when ``s2`` occurs in ``s1``; an empty ``s2`` always occurs."""
    return s2 in s1


def count_chars(s: str, chars: str) -> int:
    """Count matches of the characters of ``s`` against ``chars``.

    The first character of ``s`` is checked against every entry of ``chars``;
    each later character is checked against every entry but the first.
    Repeated entries in ``chars`` count once each.
    """
    total = 0
    for i, ch in enumerate(s):
        pool = chars if i == 0 else chars[1:]
        total += pool.count(ch)
    return total