"""String building, copying, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def char_trim(s: str | None, quote: str) -> str | None:
    """Text between the first ``quote`` and the last later ``quote``.

    Returns None when ``s`` is None, when no opening ``quote`` exists, or when
    no closing ``quote`` follows with at least one character in between.
    """
    quote = _single(quote)
    if s is None:
        return None
    first = s.find(quote)
    if first < 0:
        return None
    start = first + 1
    last = s.rfind(quote, start + 1)
    if last < 0:
        return None
    return s[start:last]


def cut_chars(s: str, cut: str) -> str:
    """Return ``s`` with every character that appears in ``cut`` removed."""
    removed = frozenset(cut)
    return "".join(ch for ch in s if ch not in removed)


def linelen(lines: Sequence[str]) -> int:
    """Number of lines in ``lines``."""
    return len(lines)


def split(s: str | None, c: str) -> list[str] | None:
    """Split ``s`` on ``c``, dropping empty pieces; None when ``s`` is None."""
    c = _single(c)
    if s is None:
        return None
    return [word for word in s.split(c) if word]


def strdup_lines(lines: Iterable[str]) -> list[str]:
    """Return a new list holding the same lines."""
    return list(lines)


def striteri(
    s: str | None, f: Callable[[int, str], str | None] | None
) -> str | None:
    """Call ``f(i, ch)`` for each character and return the resulting string.

    A string returned by ``f`` replaces the character; any other result keeps it.
    ``s`` is returned unchanged when it is None or empty or when ``f`` is None.
    """
    if not s or f is None:
        return s
    pieces = []
    for i, ch in enumerate(s):
        result = f(i, ch)
        pieces.append(result if isinstance(result, str) else ch)
    return "".join(pieces)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate ``s1`` and ``s2``; a None ``s1`` yields ``s2`` itself."""
    if s1 is None:
        return s2
    if s2 is None:
        raise TypeError("the second string is required")
    return s1 + s2


def strlen(s: str | None) -> int:
    """Length of ``s``, or 0 for None."""
    return 0 if s is None else len(s)


def strmapi(
    s: str | None, f: Callable[[int, str], str] | None
) -> str | None:
    """Build a string from ``f(i, ch)`` for every character; None if either is None."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def strndup(s: str | None, n: int) -> str | None:
    """Copy at most ``n`` leading characters of ``s``; None when ``s`` is None."""
    if s is None:
        return None
    return s[: _non_negative("n", n)]


def strtrim(s: str | None, charset: str | None) -> str | None:
    """Strip characters of ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Up to ``length`` characters of ``s`` beginning at ``start``."""
    if s is None:
        return None
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s) or not length:
        return ""
    return s[start:start + length]