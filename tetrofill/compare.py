"""Ordering and equality of strings and byte sequences.

The comparisons return the difference between the first pair of differing
character codes, so a negative result means the first argument sorts
before the second, zero means they are equal and a positive result means
it sorts after. Strings compare as if each ended in a NUL character, so a
proper prefix sorts before the longer string.
"""

from __future__ import annotations

from collections.abc import Iterable

_NUL = 0


def _codes(value: str | bytes | bytearray | memoryview) -> list[int]:
    if isinstance(value, str):
        return [ord(ch) for ch in value]
    return list(bytes(value))


def _difference(a: Iterable[int], b: Iterable[int]) -> int:
    for left, right in zip(a, b):
        if left != right:
            return left - right
    return 0


def memcmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Compare the first ``n`` units of ``a`` and ``b``.

    Raises ValueError when ``n`` is negative or longer than either input.
    """
    left, right = _codes(a), _codes(b)
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(left) or n > len(right):
        raise ValueError(
            f"length {n} exceeds inputs of length {len(left)} and {len(right)}"
        )
    return _difference(left[:n], right[:n])


def _terminated(s: str) -> list[int]:
    return _codes(s) + [_NUL]


def strcmp(a: str, b: str) -> int:
    """Compare two strings."""
    return _difference(_terminated(a), _terminated(b))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n <= 0:
        return 0
    return _difference(_terminated(a)[:n], _terminated(b)[:n])


def strequ(a: str | None, b: str | None) -> bool:
    """Return whether two strings are equal; False if either is None."""
    if a is None or b is None:
        return False
    return strcmp(a, b) == 0


def strnequ(a: str | None, b: str | None, n: int) -> bool:
    """Return whether the first ``n`` characters agree; False if either is None."""
    if a is None or b is None:
        return False
    return strncmp(a, b, n) == 0