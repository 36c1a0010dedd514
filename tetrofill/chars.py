"""Character classification and case conversion limited to ASCII.

Every function takes either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

Char = "str | int"


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: str | int) -> bool:
    """Return whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """Return whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """Return whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Return whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """Return whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: str | int, low: str, high: str, shift: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Return the upper-case form of an ASCII lower-case letter, else ``c``."""
    return _convert(c, "a", "z", -32)


def to_lower(c: str | int) -> str | int:
    """Return the lower-case form of an ASCII upper-case letter, else ``c``."""
    return _convert(c, "A", "Z", 32)