"""Solution and blank grids, and where clues start in them."""

from __future__ import annotations

from typing import BinaryIO, List, Optional, Sequence

from .binio import read_bytes
from .errors import InvalidGrid
from .models import FREE_SQUARE, TAKEN_SQUARE, Grid


def parse_grids(stream: BinaryIO, width: int, height: int) -> Grid:
    """Read the solution grid and then the blank grid, one byte per cell.

    ``.`` marks a black square and ``-`` an empty square in the blank grid.
    """
    board_size = width * height
    solution_text = read_bytes(stream, board_size).decode("latin-1")
    blank_text = read_bytes(stream, board_size).decode("latin-1")

    solution = string_to_grid(solution_text, width)
    blank = string_to_grid(blank_text, width)

    validate_grid_consistency(solution, blank, width, height)
    return Grid(blank=blank, solution=solution)


def string_to_grid(text: str, width: int) -> List[str]:
    """Split a flat string into rows of ``width`` characters."""
    return [text[start:start + width] for start in range(0, len(text), width)]


def validate_grid_consistency(
    solution: Sequence[str], blank: Sequence[str], width: int, height: int
) -> None:
    """Check both grids have the given size and the same black squares."""
    if len(solution) != height or len(blank) != height:
        raise InvalidGrid(
            f"Grid height mismatch: expected {height}, got solution: "
            f"{len(solution)}, blank: {len(blank)}"
        )

    for i, (sol_row, blank_row) in enumerate(zip(solution, blank)):
        if len(sol_row) != width or len(blank_row) != width:
            raise InvalidGrid(
                f"Grid width mismatch at row {i}: expected {width}, got solution: "
                f"{len(sol_row)}, blank: {len(blank_row)}"
            )
        for j, (sol_char, blank_char) in enumerate(zip(sol_row, blank_row)):
            if (sol_char == TAKEN_SQUARE) != (blank_char == TAKEN_SQUARE):
                raise InvalidGrid(
                    f"Grid consistency error at ({i}, {j}): blocked squares don't match"
                )


def _cell(grid: Sequence[str], row: int, col: int) -> Optional[str]:
    if row < 0 or col < 0 or row >= len(grid):
        return None
    line = grid[row]
    return line[col] if col < len(line) else None


def cell_needs_across_clue(grid: Sequence[str], row: int, col: int) -> bool:
    """True if an across word of two or more free squares starts here."""
    if _cell(grid, row, col) != FREE_SQUARE:
        return False
    if _cell(grid, row, col + 1) != FREE_SQUARE:
        return False
    return col == 0 or _cell(grid, row, col - 1) == TAKEN_SQUARE


def cell_needs_down_clue(grid: Sequence[str], row: int, col: int) -> bool:
    """True if a down word of two or more free squares starts here."""
    if _cell(grid, row, col) != FREE_SQUARE:
        return False
    if _cell(grid, row + 1, col) != FREE_SQUARE:
        return False
    return row == 0 or _cell(grid, row - 1, col) == TAKEN_SQUARE