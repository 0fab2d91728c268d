import pytest

from psd_reader.exceptions import OutOfBoundsError, StructuralMismatchError
from psd_reader.psd.bin_utils import (
    Cursor,
    pack,
    pad,
    read_length_block,
    read_pascal_string,
)


def test_cursor_reads_big_endian() -> None:
    cursor = Cursor(pack("BHIhiQ", 1, 2, 3, -4, -5, 6))
    assert cursor.read_u8() == 1
    assert cursor.read_u16() == 2
    assert cursor.read_u32() == 3
    assert cursor.read_i16() == -4
    assert cursor.read_i32() == -5
    assert cursor.read_u64() == 6
    assert cursor.tell() == 21
    assert cursor.remaining() == 0


def test_cursor_read_string() -> None:
    cursor = Cursor(b"8BPS\xe9")
    assert cursor.read_string(4) == "8BPS"
    assert cursor.read_string(1) == "\xe9"


@pytest.mark.parametrize("size", [1, 2, 4])
def test_cursor_out_of_bounds(size: int) -> None:
    cursor = Cursor(b"\x00" * (size - 1))
    with pytest.raises(OutOfBoundsError) as excinfo:
        cursor.read_fmt({1: "B", 2: "H", 4: "I"}[size])
    assert excinfo.value.offset == 0
    assert cursor.tell() == 0


def test_cursor_seek() -> None:
    cursor = Cursor(b"\x00" * 10)
    assert cursor.seek(4) == 4
    assert cursor.seek(2, 1) == 6
    assert cursor.seek(-1, 2) == 9
    assert cursor.skip(1) == 10
    assert cursor.remaining() == 0
    with pytest.raises(OutOfBoundsError):
        cursor.skip(1)
    with pytest.raises(OutOfBoundsError):
        cursor.seek(-1)


def test_cursor_skip_to() -> None:
    cursor = Cursor(b"\x00" * 10)
    cursor.skip(4)
    assert cursor.skip_to(4) == 4
    assert cursor.skip_to(8) == 8
    with pytest.raises(StructuralMismatchError):
        cursor.skip_to(6)
    assert cursor.tell() == 8


def test_pad() -> None:
    assert pad(0, 2) == 0
    assert pad(3, 2) == 4
    assert pad(4, 2) == 4
    assert pad(5, 4) == 8


@pytest.mark.parametrize(
    "data, padding, expected, consumed",
    [
        (b"\x00\x00", 2, "", 2),
        (b"\x00", 1, "", 1),
        (b"\x03abc", 2, "abc", 4),
        (b"\x02ab\x00", 2, "ab", 4),
        (b"\x01a\x00\x00", 4, "a", 4),
    ],
)
def test_read_pascal_string(
    data: bytes, padding: int, expected: str, consumed: int
) -> None:
    cursor = Cursor(data + b"\xff")
    assert read_pascal_string(cursor, "macroman", padding=padding) == expected
    assert cursor.tell() == consumed


def test_read_length_block_padding() -> None:
    cursor = Cursor(pack("I", 3) + b"abc\x00" + b"\xff")
    assert read_length_block(cursor, padding=2) == b"abc\x00"
    assert cursor.tell() == 8
