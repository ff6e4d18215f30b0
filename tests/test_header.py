import io
import struct

import pytest

from puzparse.errors import InvalidDimensions, PuzIOError
from puzparse.header import parse_header


def make_header(width, height, num_clues, version, bitmask, scrambled_tag):
    return (
        bytes(10)
        + version
        + bytes(16)
        + bytes([width, height])
        + struct.pack("<HHH", num_clues, bitmask, scrambled_tag)
    )


def parse(data):
    return parse_header(io.BytesIO(data))


def test_parse_header_valid():
    header = parse(make_header(15, 15, 76, b"1.3\0", 0x0000, 0x0000))
    assert header.width == 15
    assert header.height == 15
    assert header.num_clues == 76
    assert header.version == "1.3"
    assert header.bitmask == 0x0000
    assert not header.is_scrambled


def test_parse_header_scrambled():
    header = parse(make_header(21, 21, 140, b"1.2c", 0x0004, 0x0004))
    assert header.width == 21
    assert header.height == 21
    assert header.num_clues == 140
    assert header.version == "1.2c"
    assert header.bitmask == 0x0004
    assert header.is_scrambled


@pytest.mark.parametrize(
    "raw, expected",
    [(b"1.4\0", "1.4"), (b"2.0a", "2.0a"), (b"1\0\0\0", "1")],
)
def test_parse_header_version_formats(raw, expected):
    assert parse(make_header(15, 15, 76, raw, 0, 0)).version == expected


@pytest.mark.parametrize("width, height", [(0, 15), (15, 0), (0, 0)])
def test_parse_header_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensions) as info:
        parse(make_header(width, height, 76, b"1.3\0", 0, 0))
    assert info.value.width == width
    assert info.value.height == height


def test_parse_header_large_dimensions():
    header = parse(make_header(255, 255, 30000, b"1.3\0", 0, 0))
    assert header.width == 255
    assert header.height == 255
    assert header.num_clues == 30000


def test_parse_header_minimal_dimensions():
    header = parse(make_header(1, 1, 2, b"1.3\0", 0, 0))
    assert header.width == 1
    assert header.height == 1
    assert header.num_clues == 2


@pytest.mark.parametrize("tag", [0x0001, 0x0004, 0x0008, 0xFFFF])
def test_parse_header_scrambling_detection(tag):
    assert parse(make_header(15, 15, 76, b"1.3\0", 0, tag)).is_scrambled


def test_parse_header_zero_tag_not_scrambled():
    assert parse(make_header(15, 15, 76, b"1.3\0", 0, 0)).is_scrambled is False


@pytest.mark.parametrize("bitmask", [0x0000, 0x0001, 0x0080, 0x8000, 0xFFFF])
def test_parse_header_bitmask_values(bitmask):
    assert parse(make_header(15, 15, 76, b"1.3\0", bitmask, 0)).bitmask == bitmask


def test_parse_header_truncated_data():
    data = bytes(10) + b"1.3\0" + bytes(16) + bytes([15, 15])
    with pytest.raises(PuzIOError):
        parse(data)


def test_parse_header_version_encoding():
    header = parse(make_header(15, 15, 76, bytes([ord("v"), 0x97, ord("1"), 0]), 0, 0))
    assert "\u2014" in header.version
    assert header.version.startswith("v")
    assert header.version.endswith("1")


def test_parse_header_consumes_exactly_header_bytes():
    data = make_header(3, 4, 5, b"1.3\0", 0, 0) + b"REST"
    stream = io.BytesIO(data)
    parse_header(stream)
    assert stream.read() == b"REST"