"""Byte-buffer and bounded string copying helpers.

The ``mem_*`` functions work on bytes-like data. Functions that write into
a buffer (``mem_ccpy``, ``mem_cat`` and ``strcpy``) take a ``bytearray``
and change it in place. The remaining string functions take and return
``str`` values. Strings are measured as C strings: anything from the first
NUL character on is ignored.
"""

from __future__ import annotations

Buffer = "bytes | bytearray | memoryview"

_NUL = "\0"


def _byte(c: int | bytes | bytearray) -> int:
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (bytes, bytearray)) and len(c) == 1:
        return c[0]
    raise ValueError(f"expected a byte value, got {c!r}")


def _non_negative(n: int, what: str = "length") -> None:
    if n < 0:
        raise ValueError(f"negative {what} {n}")


def _text(s: str) -> str:
    return s.split(_NUL, 1)[0]


def mem_chr(data: bytes | bytearray | memoryview, c: int | bytes, n: int) -> int | None:
    """Return the index of the first byte ``c`` among the first ``n`` bytes.

    Returns None when the byte is absent. Raises ValueError when ``n`` is
    negative or longer than ``data``.
    """
    view = bytes(data)
    _non_negative(n)
    if n > len(view):
        raise ValueError(f"length {n} exceeds data of length {len(view)}")
    position = view.find(_byte(c), 0, n)
    return None if position < 0 else position


def mem_rchr(data: bytes | bytearray | memoryview, c: int | bytes, n: int) -> int | None:
    """Return the index of the last byte ``c`` scanning from ``n`` down to 1.

    Position 0 is never examined. Returns None when the byte is absent.
    """
    _non_negative(n)
    position = bytes(data).rfind(_byte(c), 1, n + 1)
    return None if position < 0 else position


def mem_ccpy(dst: bytearray, src: bytes | bytearray | memoryview,
             c: int | bytes, n: int) -> int | None:
    """Copy bytes of ``src`` into ``dst`` up to and including the byte ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``c``, or None when ``c`` was not among the copied bytes.
    Raises ValueError when ``src`` runs out before the copy ends and
    IndexError when ``dst`` is too small.
    """
    _non_negative(n)
    source = bytes(src)[:n]
    position = source.find(_byte(c))
    found = position >= 0
    count = position + 1 if found else n
    if count > len(source):
        raise ValueError(f"source of length {len(source)} is shorter than {n}")
    if count > len(dst):
        raise IndexError(f"{count} bytes do not fit a buffer of {len(dst)}")
    dst[:count] = source[:count]
    return count if found else None


def mem_join(a: bytes | bytearray | memoryview,
             b: bytes | bytearray | memoryview) -> bytes:
    """Return a new byte string holding ``a`` followed by ``b``."""
    return bytes(a) + bytes(b)


def mem_sub(data: bytes | bytearray | memoryview, start: int, length: int) -> bytes:
    """Return the ``length`` bytes of ``data`` beginning at ``start``."""
    view = bytes(data)
    if start < 0 or length < 0 or start + length > len(view):
        raise IndexError(
            f"range [{start}, {start + length}) outside data of length {len(view)}"
        )
    return view[start:start + length]


def mem_cat(dst: bytearray, src: bytes | bytearray | memoryview, offset: int) -> bytearray:
    """Write ``src`` into ``dst`` at ``offset``, growing ``dst`` if needed."""
    if offset < 0 or offset > len(dst):
        raise IndexError(f"offset {offset} outside buffer of length {len(dst)}")
    payload = bytes(src)
    dst[offset:offset + len(payload)] = payload
    return dst


def strcat(dst: str, src: str) -> str:
    """Return ``dst`` followed by ``src``."""
    return _text(dst) + _text(src)


def strncat(dst: str, src: str, n: int) -> str:
    """Return ``dst`` followed by at most ``n`` characters of ``src``."""
    _non_negative(n)
    return _text(dst) + _text(src)[:n]


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` as if into a buffer of ``size`` characters.

    The buffer keeps room for a terminating NUL, so the result holds at
    most ``size - 1`` characters. Returns the result together with the
    length the full concatenation would have needed: ``len(dst) +
    len(src)``, or ``size + len(src)`` when ``dst`` is longer than ``size``.
    """
    _non_negative(size, "size")
    head, tail = _text(dst), _text(src)
    room = size - 1 - len(head) if size > 0 and len(head) <= size - 1 else 0
    total = len(head) + len(tail) if len(head) <= size else size + len(tail)
    return head + tail[:room], total


def strncpy(src: str, n: int) -> str:
    """Return exactly ``n`` characters: ``src`` cut or padded with NULs."""
    _non_negative(n)
    head = _text(src)[:n]
    return head + _NUL * (n - len(head))


def strcpy(dst: bytearray, src: bytes | bytearray | memoryview) -> bytearray:
    """Write ``src`` and a terminating NUL at the start of ``dst``.

    Raises ValueError when the buffer is too small.
    """
    payload = bytes(src).split(b"\0", 1)[0] + b"\0"
    if len(payload) > len(dst):
        raise ValueError(
            f"{len(payload)} bytes do not fit a buffer of {len(dst)}"
        )
    dst[:len(payload)] = payload
    return dst


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL character."""
    return _text(s)