"""Applying a function to every character of a string."""

from __future__ import annotations

from collections.abc import Callable


def _checked(result: str) -> str:
    if not isinstance(result, str) or len(result) != 1:
        raise ValueError(f"mapping must yield a single character, got {result!r}")
    return result


def map_chars(s: str, f: Callable[[str], str]) -> str:
    """Return a new string made of ``f`` applied to each character of ``s``.

    Raises ValueError if ``f`` does not return a single character.
    """
    return "".join(_checked(f(ch)) for ch in s)


def map_chars_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character.

    Raises ValueError if ``f`` does not return a single character.
    """
    return "".join(_checked(f(i, ch)) for i, ch in enumerate(s))


def each_char(s: str, f: Callable[[str], object]) -> None:
    """Call ``f`` with each character of ``s`` in order."""
    for ch in s:
        f(ch)


def each_char_indexed(s: str, f: Callable[[int, str], object]) -> None:
    """Call ``f`` with the index and value of each character of ``s``."""
    for i, ch in enumerate(s):
        f(i, ch)