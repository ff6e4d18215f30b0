"""Structural checks on a fully parsed puzzle."""

from __future__ import annotations

import string
from typing import Sequence, Tuple

from .errors import InvalidClues, InvalidDimensions, InvalidGrid
from .grids import cell_needs_across_clue, cell_needs_down_clue
from .models import TAKEN_SQUARE, Puzzle

_VALID_CHARS = frozenset(string.ascii_letters + string.digits + " -'&.!?")


def validate_puzzle(puzzle: Puzzle) -> None:
    """Check dimensions, grid structure and clue counts of a puzzle."""
    validate_puzzle_dimensions(puzzle.info.width, puzzle.info.height)
    validate_grid_structure(puzzle.grid.blank, puzzle.grid.solution)
    validate_clue_consistency(puzzle)


def validate_puzzle_dimensions(width: int, height: int) -> None:
    """Reject zero width or height."""
    if width == 0 or height == 0:
        raise InvalidDimensions(width=width, height=height)


def validate_grid_structure(blank: Sequence[str], solution: Sequence[str]) -> None:
    """Check the grids match in shape and black squares, and hold valid letters."""
    if len(blank) != len(solution):
        raise InvalidGrid("Blank and solution grids have different heights")

    for i, (blank_row, solution_row) in enumerate(zip(blank, solution)):
        if len(blank_row) != len(solution_row):
            raise InvalidGrid(f"Row {i} has mismatched widths")

        for j, (blank_char, solution_char) in enumerate(zip(blank_row, solution_row)):
            blank_blocked = blank_char == TAKEN_SQUARE
            solution_blocked = solution_char == TAKEN_SQUARE
            if blank_blocked != solution_blocked:
                raise InvalidGrid(f"Blocked square mismatch at ({i}, {j})")
            if not blank_blocked and not is_valid_puzzle_char(solution_char):
                raise InvalidGrid(f"Invalid character '{solution_char}' at ({i}, {j})")


def validate_clue_consistency(puzzle: Puzzle) -> None:
    """Check the number of across and down clues matches the grid."""
    expected_across, expected_down = count_expected_clues(puzzle.grid.blank)
    actual_across = len(puzzle.clues.across)
    actual_down = len(puzzle.clues.down)

    if actual_across != expected_across:
        raise InvalidClues(
            f"Across clue count mismatch: expected {expected_across}, got {actual_across}"
        )
    if actual_down != expected_down:
        raise InvalidClues(
            f"Down clue count mismatch: expected {expected_down}, got {actual_down}"
        )


def count_expected_clues(grid: Sequence[str]) -> Tuple[int, int]:
    """Count the across and down words that start in the grid."""
    width = len(grid[0]) if grid else 0
    cells = [(row, col) for row in range(len(grid)) for col in range(width)]
    across = sum(cell_needs_across_clue(grid, row, col) for row, col in cells)
    down = sum(cell_needs_down_clue(grid, row, col) for row, col in cells)
    return across, down


def is_valid_puzzle_char(char: str) -> bool:
    """True for ASCII letters, digits and `` -'&.!?``."""
    return len(char) == 1 and char in _VALID_CHARS