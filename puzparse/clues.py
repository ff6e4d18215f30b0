"""Assigning the clue list to numbered across and down entries."""

from __future__ import annotations

from typing import Sequence

from .errors import InvalidClues
from .grids import cell_needs_across_clue, cell_needs_down_clue
from .models import Clues


def process_clues(blank_grid: Sequence[str], clue_strings: Sequence[str]) -> Clues:
    """Number the grid in reading order and hand out clues to each start.

    At a square that starts both words the across clue comes first. Every
    clue must be used exactly once.
    """
    clues = Clues()
    remaining = iter(clue_strings)
    used = 0
    number = 1

    width = len(blank_grid[0]) if blank_grid else 0

    for row in range(len(blank_grid)):
        for col in range(width):
            starts = [
                (direction, target)
                for direction, target, needed in (
                    ("across", clues.across, cell_needs_across_clue(blank_grid, row, col)),
                    ("down", clues.down, cell_needs_down_clue(blank_grid, row, col)),
                )
                if needed
            ]
            if not starts:
                continue
            for direction, target in starts:
                clue = next(remaining, None)
                if clue is None:
                    raise InvalidClues(
                        f"Not enough clues provided: need {direction} clue "
                        f"for position {number}"
                    )
                target[number] = clue
                used += 1
            number += 1

    if used < len(clue_strings):
        raise InvalidClues(
            f"Too many clues provided: expected {used}, got {len(clue_strings)}"
        )

    return clues