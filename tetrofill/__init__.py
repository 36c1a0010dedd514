"""Pack tetrominoes into the smallest square, with small text and byte helpers."""

__version__ = "0.1.0"