"""Tetromino shapes: recognising them in a 4x4 block and their cell offsets.

A block is the text of a 4x4 grid, four characters per row followed by a
newline, so a cell at row ``r`` and column ``c`` sits at index ``r * 5 + c``.
Cell offsets use the same indexing, taken from the top-left corner of the
piece's bounding box.
"""

from __future__ import annotations

from dataclasses import dataclass

ROW = 5
"""Characters per block row, counting the newline."""

_SQUARE = (0, 1, 5, 6)

_COORDINATES: dict[tuple[str, int], tuple[int, int, int, int]] = {
    ("I", 0): (0, 5, 10, 15),
    ("I", 1): (0, 1, 2, 3),
    # Pieces two columns wide and three rows tall.
    ("L", 0): (0, 5, 10, 11),
    ("J", 0): (1, 6, 10, 11),
    ("L", 2): (0, 1, 6, 11),
    ("J", 2): (0, 1, 5, 10),
    ("T", 1): (1, 5, 6, 11),
    ("T", 3): (0, 5, 6, 10),
    ("S", 1): (0, 5, 6, 11),
    ("Z", 1): (1, 5, 6, 10),
    # Pieces three columns wide and two rows tall.
    ("L", 3): (2, 5, 6, 7),
    ("J", 3): (0, 1, 2, 7),
    ("L", 1): (0, 1, 2, 5),
    ("J", 1): (0, 5, 6, 7),
    ("T", 0): (0, 1, 2, 6),
    ("T", 2): (1, 5, 6, 7),
    ("S", 0): (1, 2, 5, 6),
    ("Z", 0): (0, 1, 6, 7),
}


def coordinates(name: str, orientation: int) -> tuple[int, int, int, int]:
    """Return the four cell offsets of a piece in the given orientation.

    The square has a single orientation, so its orientation is ignored.
    """
    if name == "O":
        return _SQUARE
    try:
        return _COORDINATES[(name, orientation)]
    except KeyError:
        raise ValueError(
            f"unknown piece {name!r} in orientation {orientation!r}"
        ) from None


def _filled(block: str) -> list[int]:
    positions = [i for i, ch in enumerate(block) if ch == "#"]
    if not positions:
        raise ValueError("block holds no filled cell")
    return positions


def block_width(block: str) -> int:
    """Return the number of columns spanned by the filled cells."""
    columns = [i % ROW for i in _filled(block)]
    return max(columns) - min(columns) + 1


def block_height(block: str) -> int:
    """Return the number of rows spanned by the filled cells."""
    rows = [i // ROW for i in _filled(block)]
    return max(rows) - min(rows) + 1


def _filled_at(block: str, position: int) -> bool:
    return 0 <= position < len(block) and block[position] == "#"


def _classify_vertical(block: str, first: int) -> tuple[str, int]:
    def hit(*offsets: int) -> bool:
        return all(_filled_at(block, first + off) for off in offsets)

    if hit(6, 10):
        return "T", 3
    if hit(10, 11):
        return "L", 0
    if hit(9, 10):
        return "J", 0
    if hit(1, 10):
        return "J", 2
    if hit(1, 6):
        return "L", 2
    if hit(4, 10):
        return "T", 1
    if hit(6, 11, 5):
        return "S", 1
    return "Z", 1


def _classify_horizontal(block: str, first: int) -> tuple[str, int]:
    def hit(*offsets: int) -> bool:
        return all(_filled_at(block, first + off) for off in offsets)

    if hit(3):
        return "L", 3
    if hit(7, 2):
        return "J", 3
    if hit(4, 6):
        return "T", 2
    if hit(7, 5):
        return "J", 1
    if hit(2, 5):
        return "L", 1
    if hit(2, 6):
        return "T", 0
    if hit(4, 1):
        return "S", 0
    return "Z", 0


def classify(block: str) -> tuple[str, int]:
    """Return the name and orientation of the piece drawn in a valid block."""
    height = block_height(block)
    width = block_width(block)
    if height == 2 and width == 2:
        return "O", 0
    if width == 1:
        return "I", 0
    if height == 1:
        return "I", 1
    first = block.index("#")
    if width == 2:
        return _classify_vertical(block, first)
    return _classify_horizontal(block, first)


@dataclass(frozen=True)
class Tetromino:
    """A piece read from the input, with the letter it is drawn with."""

    name: str
    letter: str
    height: int
    width: int
    orientation: int = 0

    def cells(self) -> tuple[int, int, int, int]:
        """Return the cell offsets of this piece."""
        return coordinates(self.name, self.orientation)


def parse_tetromino(block: str, letter: str) -> Tetromino:
    """Recognise the piece in a validated block and label it with ``letter``."""
    name, orientation = classify(block)
    return Tetromino(
        name=name,
        letter=letter,
        height=block_height(block),
        width=block_width(block),
        orientation=orientation,
    )