"""
Color mode data structure.
"""

import array
import logging
from typing import Any, TypeVar

from attrs import define, field

from psd_reader.constants import ColorMode
from psd_reader.exceptions import DecodeWarning, decoding
from psd_reader.psd.base import BaseElement
from psd_reader.psd.bin_utils import Cursor, trimmed_repr

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ColorModeData")


@define(frozen=True)
class ColorModeData(BaseElement):
    """
    Color mode data section of the PSD file.

    For indexed color images the data is the color table for the image in a
    non-interleaved order.

    Duotone images also have this data, but the data format is undocumented.
    Every other color mode is expected to have an empty section; a
    non-empty one is skipped without being interpreted.

    .. py:attribute:: offset

        Offset of the data, right after the length field.

    .. py:attribute:: length

        Declared byte length.

    .. py:attribute:: value

        Opaque palette bytes for Indexed and Duotone modes, otherwise empty.
    """

    offset: int = 0
    length: int = 0
    value: bytes = field(default=b"", repr=trimmed_repr)
    warnings: tuple = field(factory=tuple, converter=tuple, repr=False)

    @classmethod
    def read(
        cls: type[T], cursor: Cursor, color_mode: int = ColorMode.RGB, **kwargs: Any
    ) -> T:
        with decoding("color_mode_data", cursor):
            length = cursor.read_u32()
            offset = cursor.tell()
            logger.debug("reading color mode data, len=%d" % length)
            if color_mode in (ColorMode.INDEXED, ColorMode.DUOTONE):
                return cls(offset, length, cursor.read(length))

            warnings = []
            if length:
                warnings.append(
                    DecodeWarning.emit(
                        "color_mode_data",
                        offset,
                        "%d bytes of color mode data in %s mode are skipped"
                        % (length, ColorMode.name_of(color_mode)),
                    )
                )
                cursor.skip(length)
            return cls(offset, length, b"", warnings)

    def interleave(self) -> bytes:
        """
        Returns interleaved color table in bytes.

        Only meaningful for the 768-byte indexed color table, stored as 256
        reds followed by 256 greens and 256 blues.
        """
        if len(self.value) != 768:
            raise ValueError(
                "Expected a 768-byte color table, got %d bytes" % len(self.value)
            )
        return b"".join(
            array.array(
                "B", [(self.value[i]), (self.value[i + 256]), (self.value[i + 512])]
            ).tobytes()
            for i in range(256)
        )
