"""Command line entry point: solve the piece file named on the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .solver import solve_text
from .validate import ValidationError


def main(argv: Sequence[str] | None = None) -> int:
    """Print the solved square for a piece file, or ``error`` if it is bad."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write("usage: tetrofill file\n")
        return 1
    try:
        with open(args[0], encoding="latin-1", newline="") as handle:
            data = handle.read()
        solution = solve_text(data)
    except (OSError, ValidationError):
        sys.stdout.write("error\n")
        return 0
    sys.stdout.write(solution + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())