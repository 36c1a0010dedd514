"""Fitting tetrominoes into the smallest square that holds them all.

Pieces go in the order they were read. Each one takes the first free place
in reading order, left to right and then top to bottom. When a piece fits
nowhere, the previous piece moves on to its next place. When the first
piece runs out of places, the square grows by one and the search starts
again.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import product

from .pieces import ROW, Tetromino, parse_tetromino
from .validate import validate

EMPTY = "."
MIN_SIZE = 2

Grid = list[list[str]]
Shape = list[tuple[int, int]]


def read_tetrominoes(data: str) -> list[Tetromino]:
    """Validate a piece file and return its pieces lettered from ``A``."""
    return [
        parse_tetromino(block, chr(ord("A") + number))
        for number, block in enumerate(validate(data))
    ]


def minimal_size(count: int, start: int = 0) -> int:
    """Return the first side, from ``start`` (or 2), whose area fits the pieces."""
    size = start or MIN_SIZE
    while size * size < count * 4:
        size += 1
    return size


def empty_map(size: int) -> Grid:
    """Return a square grid of the given side with every cell empty."""
    return [[EMPTY] * size for _ in range(size)]


def _render(grid: Grid) -> str:
    return "\n".join("".join(row) for row in grid)


def _fits(grid: Grid, cells: Shape) -> bool:
    size = len(grid)
    return all(r < size and c < size and grid[r][c] == EMPTY for r, c in cells)


def _mark(grid: Grid, cells: Shape, value: str) -> None:
    for r, c in cells:
        grid[r][c] = value


def _place(grid: Grid, pieces: Sequence[Tetromino], shapes: Sequence[Shape],
           index: int) -> bool:
    if index == len(pieces):
        return True
    size = len(grid)
    letter = pieces[index].letter
    for row, col in product(range(size), repeat=2):
        cells = [(row + r, col + c) for r, c in shapes[index]]
        if not _fits(grid, cells):
            continue
        _mark(grid, cells, letter)
        if _place(grid, pieces, shapes, index + 1):
            return True
        _mark(grid, cells, EMPTY)
    return False


def solve(pieces: Iterable[Tetromino]) -> str:
    """Return the filled square as text, rows separated by newlines."""
    pieces = list(pieces)
    shapes = [[divmod(cell, ROW) for cell in piece.cells()] for piece in pieces]
    size = minimal_size(len(pieces))
    while True:
        grid = empty_map(size)
        if _place(grid, pieces, shapes, 0):
            return _render(grid)
        size = minimal_size(len(pieces), size + 1)


def solve_text(data: str) -> str:
    """Validate a piece file and return the square that solves it."""
    return solve(read_tetrominoes(data))