"""
Image data section structure.

:py:class:`ImageData` corresponds to the last section of the PSD/PSB file
where a composited image is stored. Decompression is out of scope; the
section only records where the compressed planes are.
"""

import logging
from typing import Any, Optional, TypeVar

from attrs import define

from psd_reader.constants import Compression
from psd_reader.exceptions import decoding
from psd_reader.psd.base import BaseElement
from psd_reader.psd.bin_utils import Cursor

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ImageData")


@define(frozen=True)
class ImageData(BaseElement):
    """
    Merged channel image data.

    .. py:attribute:: offset

        Offset of the section.

    .. py:attribute:: compression

        Raw compression code, or None when the file ends before the
        section. See :py:class:`~psd_reader.constants.Compression`.

    .. py:attribute:: length

        Byte length of the compressed data following the compression code.
    """

    offset: int = 0
    compression: Optional[int] = None
    length: int = 0

    @property
    def method(self) -> Optional[Compression]:
        """Resolved :py:class:`~psd_reader.constants.Compression` or None."""
        if self.compression is None:
            return None
        return Compression.resolve(self.compression)

    @classmethod
    def read(cls: type[T], cursor: Cursor, **kwargs: Any) -> T:
        with decoding("image_data", cursor):
            offset = cursor.tell()
            if not cursor.is_readable(2):
                logger.debug("no image data, offset=%d" % offset)
                return cls(offset)
            compression = cursor.read_u16()
            length = cursor.remaining()
            cursor.skip(length)
            logger.debug("  read image data, len=%d" % (cursor.tell() - offset))
            return cls(offset, compression, length)
