"""Utility library: character checks, strings, buffers, lists, line reading and printf."""

__version__ = "0.1.0"
__all__ = [
    "check",
    "conversion",
    "search",
    "memory",
    "strings",
    "lists",
    "gnl",
    "output",
    "printf",
]