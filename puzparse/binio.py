"""Low-level readers for the binary .puz layout."""

from __future__ import annotations

import struct
from typing import BinaryIO, Optional

from .errors import InvalidMagic, PuzIOError

MAGIC = b"ACROSS&DOWN\0"

_EOF_MESSAGE = "I/O operation failed: failed to fill whole buffer"

# Windows-1252 code points for bytes 0x80-0x9F; unused slots map straight
# through to the matching C1 control character.
_CP1252_HIGH = (
    "\u20ac", "\u0081", "\u201a", "\u0192", "\u201e", "\u2026", "\u2020", "\u2021",
    "\u02c6", "\u2030", "\u0160", "\u2039", "\u0152", "\u008d", "\u017d", "\u008f",
    "\u0090", "\u2018", "\u2019", "\u201c", "\u201d", "\u2022", "\u2013", "\u2014",
    "\u02dc", "\u2122", "\u0161", "\u203a", "\u0153", "\u009d", "\u017e", "\u0178",
)


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    """Read exactly ``count`` bytes or raise an end-of-file error."""
    chunks = []
    remaining = count
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise PuzIOError(_EOF_MESSAGE, kind="UnexpectedEof")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def validate_file_magic(stream: BinaryIO) -> None:
    """Skip the file checksum and check the 12-byte magic string."""
    skip_bytes(stream, 2)
    magic = _read_exact(stream, len(MAGIC))
    if magic != MAGIC:
        raise InvalidMagic(found=magic)


def skip_bytes(stream: BinaryIO, count: int) -> None:
    """Consume ``count`` bytes, failing if fewer are available."""
    _read_exact(stream, count)


def read_u8(stream: BinaryIO) -> int:
    """Read one unsigned byte."""
    return _read_exact(stream, 1)[0]


def read_u16(stream: BinaryIO) -> int:
    """Read a little-endian unsigned 16-bit integer."""
    (value,) = struct.unpack("<H", _read_exact(stream, 2))
    return value


def read_bytes(stream: BinaryIO, count: int) -> bytes:
    """Read exactly ``count`` bytes."""
    return _read_exact(stream, count)


def read_string_until_nul(stream: BinaryIO) -> str:
    """Read a NUL-terminated string and decode it."""
    collected = bytearray()
    while True:
        byte = read_u8(stream)
        if byte == 0:
            break
        collected.append(byte)
    return decode_puz_string(bytes(collected))


def decode_puz_string(data: bytes) -> str:
    """Decode as UTF-8, falling back to Windows-1252 byte by byte."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return "".join(windows_1252_to_char(byte) for byte in data)


def windows_1252_to_char(byte: int) -> str:
    """Map a single Windows-1252 byte to its character."""
    if 0x80 <= byte <= 0x9F:
        return _CP1252_HIGH[byte - 0x80]
    return chr(byte)


def read_remaining_data(stream: BinaryIO) -> bytes:
    """Read everything left in the stream."""
    data = stream.read()
    return data or b""


def find_section(data: bytes, section_name: str) -> Optional[bytes]:
    """Return the body of the first named extension section, if complete.

    A section is its 4-byte name, a little-endian length, a 2-byte
    checksum and then the data itself.
    """
    name = section_name.encode("latin-1")
    index = data.find(name)
    if index < 0:
        return None
    length_start = index + len(name)
    if length_start + 2 > len(data):
        return None
    (length,) = struct.unpack_from("<H", data, length_start)
    data_start = length_start + 4
    data_end = data_start + length
    if data_end > len(data):
        return None
    return bytes(data[data_start:data_end])