"""Optional extension sections: rebus squares, circles and given cells."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .binio import decode_puz_string, find_section
from .errors import PuzError, PuzWarning, SectionSizeMismatch, SkippedExtension
from .models import Extensions, Rebus

_CIRCLED = 0x80
_GIVEN = 0x40
_KEY = re.compile(r"\+?[0-9]+")

BoolGrid = List[List[bool]]


def _size_mismatch_reason(expected: int, found: int) -> str:
    return f"Size mismatch: expected {expected} bytes, got {found}"


def parse_extensions(
    data: bytes, width: int, height: int
) -> Tuple[Extensions, List[PuzWarning]]:
    """Read the GRBS/RTBL and GEXT sections, turning problems into warnings."""
    extensions = Extensions()
    warnings: List[PuzWarning] = []
    expected_size = width * height

    grbs = find_section(data, "GRBS")
    if grbs is not None:
        if len(grbs) != expected_size:
            warnings.append(
                SkippedExtension("GRBS", _size_mismatch_reason(expected_size, len(grbs)))
            )
        else:
            rtbl = find_section(data, "RTBL")
            if rtbl is None:
                warnings.append(
                    SkippedExtension(
                        "GRBS",
                        "RTBL section not found - rebus requires both GRBS and RTBL",
                    )
                )
            else:
                try:
                    extensions.rebus = parse_rebus(grbs, rtbl, width, height)
                except PuzError as error:
                    warnings.append(
                        SkippedExtension(
                            "GRBS/RTBL", f"Failed to parse rebus data: {error}"
                        )
                    )

    gext = find_section(data, "GEXT")
    if gext is not None:
        if len(gext) != expected_size:
            warnings.append(
                SkippedExtension("GEXT", _size_mismatch_reason(expected_size, len(gext)))
            )
        else:
            try:
                extensions.circles, extensions.given = parse_gext(gext, width, height)
            except PuzError as error:
                warnings.append(
                    SkippedExtension("GEXT", f"Failed to parse GEXT data: {error}")
                )

    return extensions, warnings


def parse_rebus(grbs_data: bytes, rtbl_data: bytes, width: int, height: int) -> Rebus:
    """Build a rebus from its key grid and its ``key:value;`` table."""
    grid_size = width * height
    if len(grbs_data) != grid_size:
        raise SectionSizeMismatch(section="GRBS", expected=grid_size, found=len(grbs_data))

    grid = [list(grbs_data[start:start + width]) for start in range(0, grid_size, width)]

    table = {}
    for entry in decode_puz_string(rtbl_data).split(";"):
        if not entry.strip():
            continue
        key_text, colon, value = entry.partition(":")
        if not colon:
            continue
        key_text = key_text.strip()
        if not _KEY.fullmatch(key_text):
            continue
        key = int(key_text)
        if key <= 0xFF:
            table[key] = value.strip()

    return Rebus(grid=grid, table=table)


def parse_gext(
    data: bytes, width: int, height: int
) -> Tuple[Optional[BoolGrid], Optional[BoolGrid]]:
    """Split the GEXT flag bytes into circled and given grids.

    Each grid is ``None`` when no cell carries its flag.
    """
    grid_size = width * height
    if len(data) != grid_size:
        raise SectionSizeMismatch(section="GEXT", expected=grid_size, found=len(data))

    rows = [data[start:start + width] for start in range(0, grid_size, width)]
    circles = [[bool(byte & _CIRCLED) for byte in row] for row in rows]
    given = [[bool(byte & _GIVEN) for byte in row] for row in rows]

    return (
        circles if any(map(any, circles)) else None,
        given if any(map(any, given)) else None,
    )