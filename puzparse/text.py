"""Reading the block of NUL-terminated strings that follows the grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, List

from .binio import read_string_until_nul
from .errors import InvalidClueCount, PuzError


@dataclass
class StringData:
    """Title, author, copyright, notes and the clues in file order."""

    title: str
    author: str
    copyright: str
    notes: str
    clues: List[str] = field(default_factory=list)


def parse_strings(stream: BinaryIO, num_clues: int) -> StringData:
    """Read title, author, copyright, ``num_clues`` clues and notes."""
    title = read_string_until_nul(stream)
    author = read_string_until_nul(stream)
    copyright_text = read_string_until_nul(stream)

    clues: List[str] = []
    for index in range(num_clues):
        try:
            clues.append(read_string_until_nul(stream))
        except PuzError:
            raise InvalidClueCount(expected=num_clues, found=index) from None

    notes = read_string_until_nul(stream)

    if len(clues) != num_clues:
        raise InvalidClueCount(expected=num_clues, found=len(clues))

    return StringData(
        title=title,
        author=author,
        copyright=copyright_text,
        notes=notes,
        clues=clues,
    )