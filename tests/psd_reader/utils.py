"""
Builders of synthetic PSD fragments.

Each builder returns the bytes of one structure laid out as Photoshop
writes it, so tests can decode them and check cursor positions exactly.
"""
import logging
from typing import Iterable, Optional, Sequence, Tuple

from psd_reader.psd.bin_utils import pack

logging.basicConfig(level=logging.DEBUG)


def length_block(data: bytes, fmt: str = "I") -> bytes:
    return pack(fmt, len(data)) + data


def header(
    version: int = 1,
    channels: int = 3,
    height: int = 10,
    width: int = 10,
    depth: int = 8,
    color_mode: int = 3,
    signature: bytes = b"8BPS",
) -> bytes:
    return signature + pack(
        "H6xHIIHH", version, channels, height, width, depth, color_mode
    )


def image_resource(
    key: int,
    data: bytes = b"",
    name: bytes = b"",
    signature: bytes = b"8BIM",
) -> bytes:
    name_field = pack("B", len(name)) + name
    if len(name_field) % 2:
        name_field += b"\x00"
    data_field = length_block(data)
    if len(data) % 2:
        data_field += b"\x00"
    return signature + pack("H", key) + name_field + data_field


def image_resources(*blocks: bytes) -> bytes:
    return length_block(b"".join(blocks))


def layer_record(
    top: int = 0,
    left: int = 0,
    right: int = 0,
    bottom: int = 0,
    channels: Sequence[Tuple[int, int]] = (),
    signature: bytes = b"8BIM",
    blend_mode: bytes = b"norm",
    opacity: int = 255,
    clipping: int = 0,
    flags: int = 8,
    extra: Optional[bytes] = None,
    mask: bytes = b"",
    ranges: bytes = b"",
    name: bytes = b"",
    tail: bytes = b"",
    version: int = 1,
) -> bytes:
    """
    Layer record bytes. ``extra`` overrides the whole extra data block,
    otherwise it is built from ``mask``, ``ranges``, ``name`` and ``tail``.
    """
    length_fmt = "Q" if version == 2 else "I"
    data = pack("4iH", top, left, right, bottom, len(channels))
    for channel_id, length in channels:
        data += pack("h" + length_fmt, channel_id, length)
    data += signature + blend_mode + pack("BBBx", opacity, clipping, flags)
    if extra is None:
        extra = (
            length_block(mask)
            + length_block(ranges)
            + pack("B", len(name))
            + name
            + tail
        )
    return data + length_block(extra)


def extra_start(num_channels: int = 0, version: int = 1) -> int:
    """Offset of the extra data block from the start of a layer record."""
    return 34 + num_channels * (10 if version == 2 else 6)


def layer_and_mask(
    records: Iterable[bytes] = (),
    layer_count: Optional[int] = None,
    channel_data: bytes = b"",
    trailer: bytes = b"",
    version: int = 1,
) -> bytes:
    records = list(records)
    if layer_count is None:
        layer_count = len(records)
    info = pack("h", layer_count) + b"".join(records) + channel_data
    if len(info) % 2:
        info += b"\x00"
    length_fmt = "Q" if version == 2 else "I"
    return length_block(length_block(info, length_fmt) + trailer, length_fmt)


def psd(
    header_data: Optional[bytes] = None,
    color_mode_data: bytes = b"",
    resources: Optional[bytes] = None,
    layers: Optional[bytes] = None,
    image_data: bytes = b"",
) -> bytes:
    if header_data is None:
        header_data = header()
    if resources is None:
        resources = image_resources()
    if layers is None:
        layers = layer_and_mask()
    return (
        header_data
        + length_block(color_mode_data)
        + resources
        + layers
        + image_data
    )
