"""Numeric string conversion and ASCII case mapping."""

from __future__ import annotations

_LEADING_SPACE = frozenset("\t\n\v\f\r ")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(s: str) -> int:
    rest = s.lstrip("".join(_LEADING_SPACE))
    negative = False
    if rest[:1] == "-":
        negative = True
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value."""
    return _wrap(_parse(s), 32)


def atol(s: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit signed value."""
    return _wrap(_parse(s), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def _map_case(c: str | int, low: str, high: str, delta: int) -> str | int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return chr(ord(c) + delta) if low <= c <= high else c
    if isinstance(c, int):
        return c + delta if ord(low) <= c <= ord(high) else c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def tolower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    return _map_case(c, "A", "Z", 32)


def toupper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    return _map_case(c, "a", "z", -32)