# puzparse

Read `.puz` crossword puzzle files, the binary format used by Across Lite and
similar programs, and get the puzzle back as plain Python data.

The parser handles:

- title, author, copyright and notes
- the solution grid and the blank grid
- across and down clues, numbered in the standard way
- rebus squares (`GRBS` and `RTBL` sections)
- circled and given squares (`GEXT` section)
- scrambled puzzles, which it detects and reports as a warning
- text in UTF-8, or in Windows-1252 when the text is not valid UTF-8

## Installation

```
pip install .
```

## Command line

```
puz puzzle.puz                  # parse and print JSON to stdout
puz *.puz --pretty              # parse several files, indented output
puz daily.puz -o output.json    # write the JSON to a file
puz puzzle.puz --single         # print one object rather than an array
puz --version
```

Options:

- `-o FILE`, `--output FILE`: write the JSON to `FILE` instead of stdout
- `-p`, `--pretty`: indent the JSON
- `-s`, `--single`: with exactly one file, print its puzzle on its own
  instead of wrapping it in an array
- `-V`, `--version`: print the version

By default the output is a JSON array with one entry per file. Each entry has
these fields:

- `file`: the path that was given
- `success`: whether the file parsed
- `puzzle`: the parsed puzzle, present when parsing succeeded
- `error`: the error message, present when parsing failed

With `--single` and one file, a puzzle that parsed is printed as a bare
object. A file that failed is still printed as its result entry. Errors and
warnings go to stderr. A file that fails to parse does not change the exit
status. The command exits with status 1 only when the output file cannot be
written.

## Library

```python
from puzparse.parser import parse, parse_bytes, parse_file

puzzle = parse_file("puzzle.puz")
print(puzzle.info.title, puzzle.info.author)
print(f"{puzzle.info.width}x{puzzle.info.height}")

for number, clue in sorted(puzzle.clues.across.items()):
    print(number, clue)

for row in puzzle.grid.solution:
    print(row)

if puzzle.extensions.rebus:
    for key, value in puzzle.extensions.rebus.table.items():
        print(key, value)
```

To see the warnings as well, call `parse` on an open binary stream:

```python
from puzparse.parser import parse

with open("puzzle.puz", "rb") as stream:
    result = parse(stream)

for warning in result.warnings:
    print("warning:", warning)
puzzle = result.result
```

Other functions and methods:

- `parse_bytes(data)` parses a file that is already in memory.
- `parse_file` and `parse_bytes` discard the warnings.
- `Puzzle.to_dict()` returns a dictionary that can be serialised as JSON.
  In that dictionary, clue numbers and rebus keys become string keys.

The data types are in `puzparse.models`:

| Type | Fields |
| --- | --- |
| `Puzzle` | `info`, `grid`, `clues`, `extensions` |
| `PuzzleInfo` | title, author, copyright, notes, width, height, version, `is_scrambled` |
| `Grid` | `blank` and `solution` rows. `.` is a black square and `-` is an empty square in the blank grid |
| `Clues` | `across` and `down`, dictionaries from clue number to text |
| `Extensions` | `rebus`, `circles` and `given`. Each is `None` when absent |
| `Rebus` | `grid`, the key in each cell with 0 for none, and `table`, which maps each key to its text |

Every parsing failure raises a subclass of `puzparse.errors.PuzError`. Examples
are `InvalidMagic`, `InvalidDimensions`, `InvalidGrid`, `InvalidClues`,
`InvalidClueCount` and `PuzIOError`. `PuzIOError` covers truncated data and
files that cannot be opened.

Problems that do not stop parsing are reported as `PuzWarning` objects in
`ParseResult.warnings`. One example is `SkippedExtension`, for an extension
section that cannot be read. Another is `ScrambledPuzzle`.

## What it does not do

puzparse only reads puzzles. It has these limits:

- It does not write `.puz` files.
- It does not verify the checksums stored in the file.
- It does not unscramble a scrambled solution.

## Running the tests

```
pip install .[test]
pytest
```