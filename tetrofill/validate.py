"""Checking the text of a piece file before it is solved.

A piece file holds between one and 26 blocks. Each block is four rows of
four characters, ``.`` for empty and ``#`` for filled, each row ending in a
newline; blocks are separated by one empty line and the file ends right
after the last block.
"""

from __future__ import annotations

MAX_PIECES = 26
CHUNK = 21


class ValidationError(ValueError):
    """Raised when a piece file is malformed."""


def split_blocks(data: str) -> list[str]:
    """Cut the text into 21-character chunks, the last possibly shorter."""
    return [data[start:start + CHUNK] for start in range(0, len(data), CHUNK)]


def _check_layout(block: str, number: int) -> None:
    if any(ch not in ".#\n" for ch in block):
        raise ValidationError(f"block {number}: unexpected character")
    for position in range(4, min(len(block), 20), 5):
        if block[position] != "\n":
            raise ValidationError(f"block {number}: row is not four cells wide")
    if block.count("#") != 4:
        raise ValidationError(f"block {number}: expected four filled cells")
    if not 3 <= block.count("\n") <= 5:
        raise ValidationError(f"block {number}: wrong number of lines")
    if len(block) > 20 and block[20] != "\n":
        raise ValidationError(f"block {number}: missing separator line")


def _check_shape(block: str, number: int) -> None:
    filled = {i for i, ch in enumerate(block) if ch == "#"}
    touches = 0
    for p in filled:
        neighbours = []
        if p > 0:
            neighbours.append(p - 1)
        if p > 4:
            neighbours.append(p - 5)
        if p < 19:
            neighbours.append(p + 1)
        if p < 15:
            neighbours.append(p + 5)
        touches += sum(1 for n in neighbours if n in filled)
    if touches not in (6, 8):
        raise ValidationError(f"block {number}: cells do not form a tetromino")


def validate(data: str) -> list[str]:
    """Check a piece file and return its blocks; raise ValidationError if bad."""
    blocks = split_blocks(data)
    if not blocks:
        raise ValidationError("no pieces given")
    if len(blocks) > MAX_PIECES:
        raise ValidationError(f"more than {MAX_PIECES} pieces")
    for number, block in enumerate(blocks, start=1):
        _check_layout(block, number)
        _check_shape(block, number)
    if len(blocks[-1]) == CHUNK:
        raise ValidationError("separator line after the last piece")
    return blocks


def is_valid(data: str) -> bool:
    """Return whether the text is a well-formed piece file."""
    try:
        validate(data)
    except ValidationError:
        return False
    return True