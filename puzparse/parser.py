"""Entry points for reading a whole .puz file."""

from __future__ import annotations

import io
import os
from typing import BinaryIO, List, Union

from .binio import read_remaining_data, validate_file_magic
from .clues import process_clues
from .errors import ParseResult, PuzIOError, PuzWarning, ScrambledPuzzle
from .extensions import parse_extensions
from .grids import parse_grids
from .header import parse_header
from .models import Puzzle, PuzzleInfo
from .text import parse_strings
from .validation import validate_puzzle

_ERROR_KINDS = (
    (FileNotFoundError, "NotFound"),
    (PermissionError, "PermissionDenied"),
    (IsADirectoryError, "IsADirectory"),
)


def parse(stream: BinaryIO) -> ParseResult[Puzzle]:
    """Parse a .puz file from a binary stream, collecting warnings."""
    warnings: List[PuzWarning] = []

    validate_file_magic(stream)
    header = parse_header(stream)
    if header.is_scrambled:
        warnings.append(ScrambledPuzzle(version=header.version))

    grid = parse_grids(stream, header.width, header.height)
    strings = parse_strings(stream, header.num_clues)

    extra = read_remaining_data(stream)
    extensions, extension_warnings = parse_extensions(extra, header.width, header.height)
    warnings.extend(extension_warnings)

    clues = process_clues(grid.blank, strings.clues)

    puzzle = Puzzle(
        info=PuzzleInfo(
            title=strings.title,
            author=strings.author,
            copyright=strings.copyright,
            notes=strings.notes,
            width=header.width,
            height=header.height,
            version=header.version,
            is_scrambled=header.is_scrambled,
        ),
        grid=grid,
        clues=clues,
        extensions=extensions,
    )
    validate_puzzle(puzzle)
    return ParseResult(result=puzzle, warnings=warnings)


def _error_kind(error: OSError) -> str:
    for error_type, kind in _ERROR_KINDS:
        if isinstance(error, error_type):
            return kind
    return "Other"


def parse_file(path: Union[str, "os.PathLike[str]"]) -> Puzzle:
    """Parse the .puz file at ``path``; warnings are discarded."""
    try:
        stream = open(path, "rb")
    except OSError as error:
        raise PuzIOError(
            f"Failed to open file: {error}", kind=_error_kind(error)
        ) from error
    with stream:
        return parse(stream).result


def parse_bytes(data: bytes) -> Puzzle:
    """Parse .puz data held in memory; warnings are discarded."""
    return parse(io.BytesIO(data)).result