# tetrofill

Packs a set of tetrominoes into the smallest square that holds all of them
and prints the filled square. Each piece is drawn with its own letter: `A`
for the first piece in the file, `B` for the second, and so on. Empty
squares are shown as `.`.

Pieces are placed in the order they appear in the file. Each piece takes the
first free place in reading order (left to right, then top to bottom). If a
piece fits nowhere, the previous piece moves to its next place. If no
arrangement fits, the square grows by one and the search starts again.

## Installing

    pip install .

## Input

The input file holds between 1 and 26 pieces. Each piece is a block of four
lines of four characters, and every line ends with a newline. Each block has
exactly four `#` characters and the rest are `.`. The four `#` must form one
connected tetromino. Blocks are separated by a single empty line, and the
file ends right after the last block, with no empty line after it:

    ....
    ##..
    .#..
    .#..

    ....
    ####
    ....
    ....

## Running

    tetrofill pieces.txt

For the file above this prints:

    AA..
    .A..
    .A..
    BBBB

If the file cannot be read or is not valid, the command prints `error` and
exits with status 0. If no file name is given, or more than one, it prints a
usage line and exits with status 1.

## Using it from Python

    from tetrofill.solver import solve_text
    from tetrofill.validate import is_valid

    with open("pieces.txt", newline="") as handle:
        data = handle.read()
    if is_valid(data):
        print(solve_text(data))

- `tetrofill.validate.validate` checks a piece file, returns its blocks and
  raises `ValidationError` (a `ValueError`) for bad input.
- `tetrofill.solver.read_tetrominoes` validates the input and returns
  `Tetromino` objects lettered from `A`.
- `tetrofill.solver.solve` packs a list of `Tetromino` objects and returns
  the square as text, rows separated by newlines.
- `tetrofill.pieces.classify` gives the name (`I`, `O`, `L`, `J`, `T`, `S`,
  `Z`) and orientation of the piece drawn in a block, and
  `tetrofill.pieces.coordinates` gives its cell offsets.

The package also has small text, byte and number helpers in
`tetrofill.textops`, `tetrofill.bytesops`, `tetrofill.compare`,
`tetrofill.mapping`, `tetrofill.chars`, `tetrofill.numbers` and
`tetrofill.output`.

## Tests

    pip install .[test]
    pytest