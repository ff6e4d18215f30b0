"""The fixed-size header that follows the magic string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .binio import decode_puz_string, read_bytes, read_u8, read_u16, skip_bytes
from .errors import InvalidDimensions


@dataclass(frozen=True)
class Header:
    """Dimensions, clue count and format details of a puzzle."""

    width: int
    height: int
    num_clues: int
    version: str
    bitmask: int
    is_scrambled: bool


def parse_header(stream: BinaryIO) -> Header:
    """Read the header fields that follow the 12-byte magic string.

    Layout: CIB checksum (2) and masked checksums (8) are skipped, then a
    4-byte version string, 16 skipped bytes (reserved, scrambled checksum,
    reserved), width, height, clue count, puzzle type bitmask and the
    scrambled tag.
    """
    skip_bytes(stream, 10)
    version = decode_puz_string(read_bytes(stream, 4))
    skip_bytes(stream, 16)

    width = read_u8(stream)
    height = read_u8(stream)
    num_clues = read_u16(stream)
    bitmask = read_u16(stream)
    scrambled_tag = read_u16(stream)

    if width == 0 or height == 0:
        raise InvalidDimensions(width=width, height=height)

    return Header(
        width=width,
        height=height,
        num_clues=num_clues,
        version=version.rstrip("\0"),
        bitmask=bitmask,
        is_scrambled=scrambled_tag != 0,
    )