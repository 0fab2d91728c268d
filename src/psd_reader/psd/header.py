"""
File header structure.
"""

import logging
from typing import Any, Optional, TypeVar

from attrs import define, evolve, field

from psd_reader.constants import SIGNATURE, ColorMode
from psd_reader.exceptions import DecodeWarning, InvalidSignatureError, decoding
from psd_reader.psd.base import BaseElement
from psd_reader.psd.bin_utils import Cursor
from psd_reader.validators import check, in_, range_

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FileHeader")


@define(repr=True, frozen=True)
class FileHeader(BaseElement):
    """
    Header section of the PSD file.

    Example::

        from psd_reader.psd.header import FileHeader

        header = FileHeader.frombytes(data)
        header.color_mode_name  # 'RGB'

    .. py:attribute:: signature

        Signature: always equal to ``b'8BPS'``.

    .. py:attribute:: version

        Version number. PSD is 1, and PSB is 2.

    .. py:attribute:: channels

        The number of channels in the image, including any user-defined alpha
        channel.

    .. py:attribute:: height

        The height of the image in pixels.

    .. py:attribute:: width

        The width of the image in pixels.

    .. py:attribute:: depth

        The number of bits per channel.

    .. py:attribute:: color_mode

        The raw color mode code. See
        :py:class:`~psd_reader.constants.ColorMode`

    .. py:attribute:: warnings

        Advisory notes for values outside of the documented ranges. The
        values themselves are kept as read.
    """

    _FORMAT = "H6xHIIHH"
    _CHECKS = (
        ("version", in_((1, 2))),
        ("channels", range_(1, 56)),
        ("depth", in_((1, 8, 16, 32))),
    )

    signature: bytes = field(default=SIGNATURE, repr=False)
    version: int = 1
    channels: int = 4
    height: int = 64
    width: int = 64
    depth: int = 8
    color_mode: int = ColorMode.RGB
    warnings: tuple = field(factory=tuple, converter=tuple, repr=False)

    @property
    def mode(self) -> Optional[ColorMode]:
        """Resolved :py:class:`~psd_reader.constants.ColorMode` or None."""
        return ColorMode.resolve(self.color_mode)

    @property
    def color_mode_name(self) -> str:
        """Color mode name such as 'RGB', or 'unknown'."""
        return ColorMode.name_of(self.color_mode)

    @classmethod
    def read(cls: type[T], cursor: Cursor, **kwargs: Any) -> T:
        start_pos = cursor.tell()
        with decoding("header", cursor):
            signature = cursor.read(4)
            if signature != SIGNATURE:
                raise InvalidSignatureError(
                    "This is not a PSD or PSB file: signature=%r" % signature,
                    offset=start_pos,
                )
            self = cls(signature, *cursor.read_fmt(cls._FORMAT))

        messages = check(self, cls._CHECKS)
        if not messages:
            return self
        warnings = [DecodeWarning.emit("header", start_pos, m) for m in messages]
        return evolve(self, warnings=warnings)
