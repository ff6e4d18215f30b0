"""Data types describing a parsed crossword puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

FREE_SQUARE = "-"
TAKEN_SQUARE = "."


@dataclass
class PuzzleInfo:
    """Metadata: title, author, dimensions and format details."""

    title: str
    author: str
    copyright: str
    notes: str
    width: int
    height: int
    version: str
    is_scrambled: bool


@dataclass
class Grid:
    """Blank and solution grids, one string per row."""

    blank: List[str]
    solution: List[str]


@dataclass
class Clues:
    """Clues keyed by clue number."""

    across: Dict[int, str] = field(default_factory=dict)
    down: Dict[int, str] = field(default_factory=dict)


@dataclass
class Rebus:
    """Rebus keys per cell (0 means none) and the key-to-text table."""

    grid: List[List[int]]
    table: Dict[int, str]


@dataclass
class Extensions:
    """Optional puzzle features."""

    rebus: Optional[Rebus] = None
    circles: Optional[List[List[bool]]] = None
    given: Optional[List[List[bool]]] = None


def _numbered(mapping: Dict[int, str]) -> Dict[str, str]:
    return {str(key): mapping[key] for key in sorted(mapping)}


@dataclass
class Puzzle:
    """A complete crossword puzzle."""

    info: PuzzleInfo
    grid: Grid
    clues: Clues
    extensions: Extensions = field(default_factory=Extensions)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary; numeric map keys become strings."""
        rebus = self.extensions.rebus
        return {
            "info": {
                "title": self.info.title,
                "author": self.info.author,
                "copyright": self.info.copyright,
                "notes": self.info.notes,
                "width": self.info.width,
                "height": self.info.height,
                "version": self.info.version,
                "is_scrambled": self.info.is_scrambled,
            },
            "grid": {
                "blank": list(self.grid.blank),
                "solution": list(self.grid.solution),
            },
            "clues": {
                "across": _numbered(self.clues.across),
                "down": _numbered(self.clues.down),
            },
            "extensions": {
                "rebus": None
                if rebus is None
                else {
                    "grid": [list(row) for row in rebus.grid],
                    "table": _numbered(rebus.table),
                },
                "circles": None
                if self.extensions.circles is None
                else [list(row) for row in self.extensions.circles],
                "given": None
                if self.extensions.given is None
                else [list(row) for row in self.extensions.given],
            },
        }