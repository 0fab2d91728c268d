from typing import Iterator

import pytest

from psd_reader.constants import ColorMode
from psd_reader.exceptions import InvalidSignatureError, OutOfBoundsError
from psd_reader.psd.bin_utils import Cursor
from psd_reader.psd.header import FileHeader

from ..utils import header


@pytest.fixture
def fixture() -> Iterator[bytes]:
    yield (
        b"8BPS\x00\x01\x00\x00\x00\x00\x00\x00\x00\x03\x00\x00\x00\x96\x00"
        b"\x00\x00d\x00 \x00\x03"
    )


def test_header_read(fixture: bytes) -> None:
    cursor = Cursor(fixture)
    header = FileHeader.read(cursor)
    assert cursor.tell() == 26
    assert header.signature == b"8BPS"
    assert header.version == 1
    assert header.channels == 3
    assert header.height == 150
    assert header.width == 100
    assert header.depth == 32
    assert header.color_mode == ColorMode.RGB
    assert header.mode is ColorMode.RGB
    assert header.color_mode_name == "RGB"
    assert header.warnings == ()


def test_header_exception(fixture: bytes) -> None:
    with pytest.raises(ValueError):
        FileHeader.frombytes(b" " + fixture)


def test_header_signature_checked_first() -> None:
    # Only the signature is present; a short buffer must not hide it.
    with pytest.raises(InvalidSignatureError) as excinfo:
        FileHeader.frombytes(b"8BPX")
    assert excinfo.value.section == "header"
    assert excinfo.value.offset == 0


def test_header_truncated() -> None:
    with pytest.raises(OutOfBoundsError) as excinfo:
        FileHeader.frombytes(b"8BPS\x00\x01")
    assert excinfo.value.section == "header"
    assert excinfo.value.offset == 4


@pytest.mark.parametrize(
    "code, name",
    [
        (0, "Bitmap"),
        (1, "Grayscale"),
        (2, "Indexed"),
        (3, "RGB"),
        (4, "CMYK"),
        (5, "unknown"),
        (6, "unknown"),
        (7, "Multichannel"),
        (8, "Duotone"),
        (9, "Lab"),
        (42, "unknown"),
    ],
)
def test_header_color_mode_name(code: int, name: str) -> None:
    header_data = FileHeader.frombytes(header(color_mode=code))
    assert header_data.color_mode == code
    assert header_data.color_mode_name == name


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(version=3),
        dict(channels=0),
        dict(channels=57),
        dict(depth=7),
    ],
)
def test_header_out_of_range_values_are_kept(kwargs: dict) -> None:
    decoded = FileHeader.frombytes(header(**kwargs))
    for key, value in kwargs.items():
        assert getattr(decoded, key) == value
    assert len(decoded.warnings) == 1
    assert decoded.warnings[0].section == "header"
    assert list(kwargs)[0] in decoded.warnings[0].message
