"""Integer helpers: absolute value, parsing, formatting and digit counts."""

from __future__ import annotations

_WHITESPACE = " \t\n\f\r\v"
_LLONG_MAX = 2**63 - 1


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def absolute(n: int) -> int:
    """Return the absolute value of ``n``."""
    return n if n > 0 else -n


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are skipped and parsing stops at the
    first non-digit. A value that overflows a 64-bit accumulator yields -1
    when positive and 0 when negative; smaller values wrap to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if value > _LLONG_MAX:
            return 0 if negative else -1
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)


def numlen(n: int) -> int:
    """Return the number of decimal digits in ``n``, sign not counted."""
    return len(str(absolute(n)))