"""String helpers: splitting, trimming, slicing, joining and searching.

Searches return an index into the string, or None when nothing is found.
Character arguments are one-character strings.
"""

from __future__ import annotations

_BLANKS = " \n\t"
_NUL = "\0"


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(s: str, sep: str) -> list[str]:
    """Return the non-empty runs of ``s`` between occurrences of ``sep``."""
    return [part for part in s.split(_single(sep)) if part]


def trim(s: str) -> str:
    """Return ``s`` without leading and trailing spaces, newlines and tabs."""
    return s.strip(_BLANKS)


def trim_char(s: str, c: str) -> str:
    """Return ``s`` without leading and trailing occurrences of ``c``."""
    return s.strip(_single(c))


def delete_char(s: str, c: str) -> str:
    """Return ``s`` with every occurrence of ``c`` removed."""
    return s.replace(_single(c), "")


def substring(s: str, start: int, length: int) -> str:
    """Return the ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0 or start + length > len(s):
        raise IndexError(
            f"substring [{start}, {start + length}) outside string of "
            f"length {len(s)}"
        )
    return s[start:start + length]


def join(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def span_until(s: str, c: str) -> int:
    """Return the number of leading characters of ``s`` that are not ``c``."""
    position = s.find(_single(c))
    return len(s) if position < 0 else position


def find(haystack: str, needle: str) -> int | None:
    """Return where ``needle`` first occurs in ``haystack``.

    An empty needle is found at index 0.
    """
    position = haystack.find(needle)
    return None if position < 0 else position


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first occurs wholly within ``haystack[:length]``.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    position = haystack.find(needle, 0, max(length, 0))
    return None if position < 0 else position


def find_char(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    The NUL character is found at the end of the string.
    """
    if _single(c) == _NUL:
        return len(s)
    position = s.find(c)
    return None if position < 0 else position


def rfind_char(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``.

    The NUL character is found at the end of the string.
    """
    if _single(c) == _NUL:
        return len(s)
    position = s.rfind(c)
    return None if position < 0 else position